"""Forms for the parent blueprint."""

from wtforms import BooleanField, Form, StringField, ValidationError
from wtforms.validators import DataRequired, Email, Length

from barnehage.core.constants import MAX_EMAIL_LENGTH, MAX_NAME_LENGTH, MAX_PHONE_LENGTH
from barnehage.core.forms import strip_whitespace
from barnehage.utils import is_valid_phone


class ParentForm(Form):
    """Payload for creating or updating a parent."""

    name = StringField(
        "Name",
        filters=[strip_whitespace],
        validators=[DataRequired(), Length(max=MAX_NAME_LENGTH)],
    )
    email = StringField(
        "Email",
        filters=[strip_whitespace],
        validators=[DataRequired(), Email(), Length(max=MAX_EMAIL_LENGTH)],
    )
    phone = StringField(
        "Phone",
        filters=[strip_whitespace],
        validators=[DataRequired(), Length(max=MAX_PHONE_LENGTH)],
    )
    address = StringField("Address", filters=[strip_whitespace])
    verified = BooleanField("Verified")

    def validate_phone(self, field):
        """Validate the phone number format."""
        if field.data and not is_valid_phone(field.data):
            raise ValidationError("Not a valid phone number.")
