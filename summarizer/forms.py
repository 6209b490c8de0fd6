"""Request validation.

The API is JSON, so these are plain WTForms ``Form`` classes fed with
``data=`` dicts (no request formdata, no CSRF).
"""

from wtforms import Form, StringField, IntegerField, FieldList
from wtforms.validators import DataRequired, Regexp, StopValidation

from .errors import ValidationError

# same pattern the UI uses when adding a recipient
EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"


class IsText:
    """Stop the chain when a JSON value is present but is not a string.

    ``data=`` dicts bypass formdata coercion, so a number or list would
    otherwise reach DataRequired (truthy) and the services as-is.
    """

    def __init__(self, message=None):
        self.message = message or "Must be a string"

    def __call__(self, form, field):
        if field.data is not None and not isinstance(field.data, str):
            raise StopValidation(self.message)


class SummaryRequestForm(Form):
    transcript_content = StringField("Transcript", validators=[
        IsText("Transcript content must be text"),
        DataRequired("Transcript content and custom prompt are required"),
    ])
    custom_prompt = StringField("Prompt", validators=[
        IsText("Custom prompt must be text"),
        DataRequired("Transcript content and custom prompt are required"),
    ])


class EditSummaryForm(Form):
    edited_summary = StringField("Edited summary", validators=[
        IsText("Edited summary must be text"),
        DataRequired("Edited summary content is required"),
    ])


class SendEmailForm(Form):
    summary_id = IntegerField("Summary", validators=[DataRequired("Summary id is required")])
    recipients = FieldList(
        StringField("Recipient", validators=[Regexp(EMAIL_PATTERN, message="Invalid email address")]),
        validators=[DataRequired("At least one email recipient is required")],
    )
    subject = StringField("Subject", validators=[
        IsText("Email subject must be text"),
        DataRequired("Email subject is required"),
    ])
    email_content = StringField("Content", validators=[
        IsText("Email content must be text"),
        DataRequired("Email content is required"),
    ])


def _first_error(errors):
    for messages in errors.values():
        for m in messages:
            # FieldList reports one list per entry, empty for valid entries
            if isinstance(m, list):
                if m:
                    return m[0]
                continue
            return m
    return None


def validate(form):
    """Run ``form.validate()`` and raise ValidationError with the first message."""
    if form.validate():
        return form
    raise ValidationError(_first_error(form.errors) or "Invalid request")
