"""Forms for pickup authorizations."""

from wtforms import Form, IntegerField, StringField, ValidationError
from wtforms.validators import DataRequired, Length

from barnehage.core.constants import MAX_NAME_LENGTH, MAX_PHONE_LENGTH
from barnehage.core.forms import strip_whitespace
from barnehage.dates import is_date_key
from barnehage.utils import is_valid_phone


class PickupAuthorizationForm(Form):
    """Payload for letting someone collect a child on a given day."""

    childId = IntegerField("Child", validators=[DataRequired()])  # noqa: N815
    name = StringField(
        "Name",
        filters=[strip_whitespace],
        validators=[DataRequired(), Length(max=MAX_NAME_LENGTH)],
    )
    relation = StringField(
        "Relation", filters=[strip_whitespace], validators=[Length(max=MAX_NAME_LENGTH)]
    )
    phone = StringField(
        "Phone", filters=[strip_whitespace], validators=[Length(max=MAX_PHONE_LENGTH)]
    )
    validDate = StringField(  # noqa: N815
        "Valid date", filters=[strip_whitespace], validators=[DataRequired()]
    )
    createdByParentId = IntegerField("Created by parent")  # noqa: N815

    def validate_phone(self, field):
        """Validate the phone number format when one is given."""
        if field.data and not is_valid_phone(field.data):
            raise ValidationError("Not a valid phone number.")

    def validate_validDate(self, field):  # noqa: N802
        """Validate that the date is written as YYYY-MM-DD."""
        if not is_date_key(field.data):
            raise ValidationError("Invalid date format (use YYYY-MM-DD).")
