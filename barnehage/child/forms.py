"""Forms for the child blueprint."""

from wtforms import BooleanField, Form, IntegerField, StringField, ValidationError
from wtforms.validators import DataRequired, Length

from barnehage.core.constants import MAX_NAME_LENGTH
from barnehage.core.forms import NumberField, strip_whitespace

from .statuses import ChildStatus
from .utils import is_valid_status


class ChildForm(Form):
    """Payload for creating or updating a child."""

    name = StringField(
        "Name",
        filters=[strip_whitespace],
        validators=[DataRequired(), Length(max=MAX_NAME_LENGTH)],
    )
    group = StringField(
        "Group", filters=[strip_whitespace], validators=[DataRequired()]
    )
    parentId = IntegerField("Parent", validators=[DataRequired()])  # noqa: N815
    birthDate = StringField("Birth date", filters=[strip_whitespace])  # noqa: N815
    age = NumberField("Age")
    # Only an explicit null in the payload reaches validation as None.
    status = StringField("Status", default=ChildStatus.HOME.value)
    consentGiven = BooleanField("Consent given")  # noqa: N815

    def validate_age(self, field):
        """Validate that the age is not negative."""
        if field.data is None:
            return
        if field.data < 0:
            raise ValidationError("Age cannot be negative.")

    def validate_status(self, field):
        """Reject anything but the three known statuses."""
        if not is_valid_status(field.data):
            raise ValidationError("Not a valid status.")
