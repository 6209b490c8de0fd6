from flask import jsonify, request

from . import bp
from ..errors import ValidationError
from ..models.base import isoformat
from ..services import transcripts as transcript_service


def _request_field(name):
    # accept JSON bodies as well as classic form posts
    payload = request.get_json(silent=True) if request.is_json else None
    if payload is not None:
        return payload.get(name) if isinstance(payload, dict) else None
    return request.form.get(name)


@bp.post("/upload")
def upload_transcript():
    file = request.files.get("transcript")
    if file is not None and file.filename:
        t = transcript_service.save_upload(file)
    else:
        content = _request_field("content")
        if not content:
            raise ValidationError("No transcript content provided")
        if not isinstance(content, str):
            raise ValidationError("Transcript content must be text")
        filename = _request_field("filename")
        if filename is not None and not isinstance(filename, str):
            raise ValidationError("Filename must be text")
        t = transcript_service.create_transcript(content, filename=filename)

    return jsonify({
        "message": "Transcript uploaded successfully",
        "transcriptId": t.id,
        "filename": t.filename,
        "fileSize": t.file_size,
        "uploadedAt": isoformat(t.uploaded_at),
    })


@bp.get("/transcripts")
def list_transcripts():
    return jsonify([t.to_listing() for t in transcript_service.list_transcripts()])


@bp.get("/transcript/<int:transcript_id>")
def get_transcript(transcript_id):
    return jsonify(transcript_service.get_transcript(transcript_id).to_dict())
