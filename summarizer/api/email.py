from flask import jsonify, request

from . import bp
from ..services.notify import send_summary_email


@bp.post("/send-email")
def send_email():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}
    result = send_summary_email(
        payload.get("summaryId"),
        payload.get("recipients"),
        payload.get("subject"),
        payload.get("emailContent"),
    )
    n = result["recipientCount"]
    return jsonify({"message": f"Email sent successfully to {n} recipient(s)", "sentCount": n})
