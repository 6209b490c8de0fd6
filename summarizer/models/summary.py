from ..extensions import db
from .base import TimestampMixin, isoformat


class Summary(db.Model, TimestampMixin):
    __tablename__ = "summaries"
    id = db.Column(db.Integer, primary_key=True)
    # weak reference: summaries may be generated from pasted text, and a
    # transcript removed by an administrator only clears the link
    transcript_id = db.Column(db.Integer, db.ForeignKey("transcripts.id", ondelete="SET NULL"), nullable=True, index=True)
    original_transcript = db.Column(db.Text, nullable=False)
    custom_prompt = db.Column(db.Text, nullable=False)
    ai_summary = db.Column(db.Text, nullable=False)
    edited_summary = db.Column(db.Text, nullable=True)

    transcript = db.relationship("Transcript", lazy="select")

    def _transcript_ref(self):
        return self.transcript.to_ref() if self.transcript is not None else None

    def to_listing(self):
        return {
            "id": self.id,
            "customPrompt": self.custom_prompt,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
            "transcriptId": self._transcript_ref(),
        }

    def to_dict(self):
        d = self.to_listing()
        d.update({
            "originalTranscript": self.original_transcript,
            "aiSummary": self.ai_summary,
            "editedSummary": self.edited_summary,
        })
        return d
