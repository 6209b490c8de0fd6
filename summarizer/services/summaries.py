"""Summary generation and editing.

The inference API is tried once; any failure (or a missing key) falls back to
the template summary in :mod:`.fallback`, which is stored like any other.
"""

from flask import current_app

from ..errors import NotFound, UpstreamFailure
from ..extensions import db
from ..forms import SummaryRequestForm, EditSummaryForm, validate
from ..models.base import utcnow
from ..models.summary import Summary
from ..models.transcript import Transcript
from . import llm
from .fallback import generate_fallback_summary


def build_prompt(custom_prompt: str, transcript_content: str) -> str:
    return f"{custom_prompt}\n\nTranscript:\n{transcript_content}"


def summarize_text(transcript_content: str, custom_prompt: str) -> str:
    if not llm.is_configured():
        current_app.logger.info('No AI_API_KEY configured, using fallback summary')
        return generate_fallback_summary(transcript_content, custom_prompt)
    try:
        return llm.chat_complete(build_prompt(custom_prompt, transcript_content))
    except UpstreamFailure as e:
        current_app.logger.exception('Inference call failed (%s), using fallback summary', e.message)
        return generate_fallback_summary(transcript_content, custom_prompt)


def _resolve_transcript_id(transcript_id):
    if transcript_id in (None, ""):
        return None
    try:
        tid = int(transcript_id)
    except (TypeError, ValueError):
        tid = None
    if tid is None or db.session.get(Transcript, tid) is None:
        current_app.logger.warning('Summary references unknown transcript %r, storing without link', transcript_id)
        return None
    return tid


def generate_summary(transcript_content, custom_prompt, transcript_id=None):
    validate(SummaryRequestForm(data={
        'transcript_content': transcript_content,
        'custom_prompt': custom_prompt,
    }))

    text = summarize_text(transcript_content, custom_prompt)
    summary = Summary(
        transcript_id=_resolve_transcript_id(transcript_id),
        original_transcript=transcript_content,
        custom_prompt=custom_prompt,
        ai_summary=text,
    )
    db.session.add(summary)
    db.session.commit()
    return summary


def list_summaries():
    return Summary.query.order_by(Summary.created_at.desc(), Summary.id.desc()).all()


def get_summary(summary_id):
    s = db.session.get(Summary, summary_id)
    if s is None:
        raise NotFound("Summary not found")
    return s


def update_summary(summary_id, edited_summary):
    validate(EditSummaryForm(data={'edited_summary': edited_summary}))
    s = get_summary(summary_id)
    s.edited_summary = edited_summary
    # set explicitly: an unchanged text would not trigger the onupdate hook
    s.updated_at = utcnow()
    db.session.commit()
    return s
