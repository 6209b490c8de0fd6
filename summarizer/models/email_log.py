from ..extensions import db
from .base import utcnow, isoformat

STATUS_SENT = "sent"
STATUS_FAILED = "failed"


class EmailLog(db.Model):
    """Audit row written once per send attempt and never updated."""
    __tablename__ = "email_logs"
    id = db.Column(db.Integer, primary_key=True)
    summary_id = db.Column(db.Integer, db.ForeignKey("summaries.id"), nullable=False, index=True)
    recipients = db.Column(db.JSON, nullable=False)
    subject = db.Column(db.Text, nullable=False)
    email_content = db.Column(db.Text, nullable=False)
    sent_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    status = db.Column(db.Enum(STATUS_SENT, STATUS_FAILED, name="email_status"), nullable=False)
    error_message = db.Column(db.Text, nullable=True)

    def to_dict(self):
        return {
            "id": self.id,
            "summaryId": self.summary_id,
            "recipients": list(self.recipients or []),
            "subject": self.subject,
            "emailContent": self.email_content,
            "sentAt": isoformat(self.sent_at),
            "status": self.status,
            "errorMessage": self.error_message,
        }
