from flask import jsonify, request

from . import bp
from ..models.base import isoformat
from ..services import summaries as summary_service


def _json_body():
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


@bp.post("/summary")
def create_summary():
    payload = _json_body()
    s = summary_service.generate_summary(
        payload.get("transcriptContent"),
        payload.get("customPrompt"),
        transcript_id=payload.get("transcriptId"),
    )
    return jsonify({
        "message": "Summary generated successfully",
        "summaryId": s.id,
        "summary": s.ai_summary,
        "createdAt": isoformat(s.created_at),
    })


@bp.get("/summaries")
def list_summaries():
    return jsonify([s.to_listing() for s in summary_service.list_summaries()])


@bp.get("/summary/<int:summary_id>")
def get_summary(summary_id):
    return jsonify(summary_service.get_summary(summary_id).to_dict())


@bp.put("/summary/<int:summary_id>")
def update_summary(summary_id):
    s = summary_service.update_summary(summary_id, _json_body().get("editedSummary"))
    return jsonify({"message": "Summary updated successfully", "summary": s.to_dict()})
