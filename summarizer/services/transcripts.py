import time

from flask import current_app

from ..errors import NotFound, PayloadTooLarge, UnsupportedMediaType, ValidationError
from ..extensions import db
from ..models.transcript import Transcript

ALLOWED_MIMETYPES = ("text/plain",)


def _limit():
    return current_app.config['MAX_TRANSCRIPT_BYTES']


def _too_large():
    return PayloadTooLarge(f"File too large (limit {_limit()} bytes)")


def create_transcript(content, filename=None, file_size=None):
    """Persist a transcript. ``file_size`` defaults to the utf-8 length of ``content``."""
    if content is None:
        raise ValidationError("No transcript content provided")
    if file_size is None:
        file_size = len(content.encode('utf-8'))
    if file_size > _limit():
        raise _too_large()
    if not content.strip():
        raise ValidationError("Transcript content is empty")

    t = Transcript(
        filename=filename or f"pasted-text-{int(time.time() * 1000)}.txt",
        content=content,
        file_size=file_size,
    )
    db.session.add(t)
    db.session.commit()
    current_app.logger.info('Stored transcript %s (%s, %d bytes)', t.id, t.filename, t.file_size)
    return t


def save_upload(file_storage):
    """Store an uploaded ``werkzeug.datastructures.FileStorage`` as a transcript."""
    if file_storage.mimetype not in ALLOWED_MIMETYPES:
        raise UnsupportedMediaType("Only .txt files are allowed")

    raw = file_storage.read(_limit() + 1)
    if len(raw) > _limit():
        raise _too_large()
    content = raw.decode('utf-8', errors='replace')
    return create_transcript(content, filename=file_storage.filename or None, file_size=len(raw))


def list_transcripts():
    return Transcript.query.order_by(Transcript.uploaded_at.desc(), Transcript.id.desc()).all()


def get_transcript(transcript_id):
    t = db.session.get(Transcript, transcript_id)
    if t is None:
        raise NotFound("Transcript not found")
    return t
