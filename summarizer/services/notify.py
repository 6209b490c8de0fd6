from flask import current_app

from ..errors import NotFound, UpstreamFailure
from ..extensions import db
from ..forms import SendEmailForm, validate
from ..models.email_log import EmailLog, STATUS_SENT, STATUS_FAILED
from ..models.summary import Summary
from .mail import send_summary


def _normalize_recipients(recipients):
    if recipients is None:
        return []
    if isinstance(recipients, str):
        recipients = [recipients]
    cleaned = [str(r).strip() for r in recipients]
    # collapse duplicates, keep first-seen order
    return list(dict.fromkeys(cleaned))


def send_summary_email(summary_id, recipients, subject, content):
    """Email ``content`` to ``recipients`` and write one EmailLog for the attempt.

    Invalid input raises ValidationError and writes nothing. A transport
    failure is logged as ``failed`` and then re-raised.
    """
    recipients = _normalize_recipients(recipients)
    form = validate(SendEmailForm(data={
        'summary_id': summary_id,
        'recipients': recipients,
        'subject': subject,
        'email_content': content,
    }))
    summary = db.session.get(Summary, form.summary_id.data)
    if summary is None:
        raise NotFound("Summary not found")

    log = EmailLog(summary_id=summary.id, recipients=recipients, subject=subject, email_content=content)
    try:
        send_summary(recipients, subject, content)
    except UpstreamFailure as e:
        log.status = STATUS_FAILED
        log.error_message = e.detail or e.message
        db.session.add(log)
        db.session.commit()
        current_app.logger.error('Email for summary %s to %d recipient(s) failed: %s', summary.id, len(recipients), log.error_message)
        raise

    log.status = STATUS_SENT
    db.session.add(log)
    db.session.commit()
    current_app.logger.info('Email for summary %s sent to %d recipient(s)', summary.id, len(recipients))
    return {"status": log.status, "recipientCount": len(recipients)}
