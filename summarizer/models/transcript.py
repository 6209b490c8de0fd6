from ..extensions import db
from .base import utcnow, isoformat


class Transcript(db.Model):
    __tablename__ = "transcripts"
    id = db.Column(db.Integer, primary_key=True)
    filename = db.Column(db.Text, nullable=False)
    content = db.Column(db.Text, nullable=False)
    # size in bytes of the uploaded file (utf-8 length for pasted text)
    file_size = db.Column(db.Integer, nullable=False, default=0)
    uploaded_at = db.Column(db.DateTime, default=utcnow, nullable=False, index=True)

    def to_ref(self):
        return {"id": self.id, "filename": self.filename}

    def to_listing(self):
        return {
            "id": self.id,
            "filename": self.filename,
            "fileSize": self.file_size,
            "uploadedAt": isoformat(self.uploaded_at),
        }

    def to_dict(self):
        d = self.to_listing()
        d["content"] = self.content
        return d
