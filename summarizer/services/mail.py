from flask import current_app
from markupsafe import escape
from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from ..errors import UpstreamFailure


def _as_html(text):
    return "<div style=\"font-family: sans-serif; white-space: pre-wrap\">" + str(escape(text)) + "</div>"


def send_summary(to_emails, subject, text):
    """Deliver one message addressed to every recipient.

    Returns the provider status code; raises UpstreamFailure when SendGrid is
    not configured or rejects the message.
    """
    api_key = current_app.config.get('SENDGRID_API_KEY')
    if not api_key:
        raise UpstreamFailure('Failed to send email', detail='Mail transport is not configured (SENDGRID_API_KEY)')

    sg = SendGridAPIClient(api_key=api_key)
    message = Mail(from_email=(current_app.config['MAIL_FROM'], current_app.config['MAIL_FROM_NAME']),
                   to_emails=list(to_emails),
                   subject=subject,
                   plain_text_content=text,
                   html_content=_as_html(text))
    try:
        resp = sg.send(message)
    except Exception as e:
        # python_http_client raises its own HTTPError subclasses for 4xx/5xx
        body = getattr(e, 'body', None)
        if isinstance(body, bytes):
            body = body.decode('utf-8', 'replace')
        raise UpstreamFailure('Failed to send email', detail=str(body or e)) from e
    if resp.status_code >= 400:
        raise UpstreamFailure('Failed to send email', detail=f'SendGrid returned HTTP {resp.status_code}')
    return resp.status_code
