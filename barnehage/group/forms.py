"""Forms for the group blueprint."""

from wtforms import Form, IntegerField, StringField, ValidationError
from wtforms.validators import DataRequired

from barnehage.core.forms import strip_whitespace


class GroupForm(Form):
    """Payload for updating a stored group."""

    name = StringField(
        "Group Name", filters=[strip_whitespace], validators=[DataRequired()]
    )
    totalCapacity = IntegerField("Total capacity")  # noqa: N815
    currentCount = IntegerField("Current count")  # noqa: N815

    def validate_totalCapacity(self, field):  # noqa: N802
        """Validate that the capacity is not negative."""
        if field.data is not None and field.data < 0:
            raise ValidationError("Capacity cannot be negative.")

    def validate_currentCount(self, field):  # noqa: N802
        """Validate that the count is not negative."""
        if field.data is not None and field.data < 0:
            raise ValidationError("Count cannot be negative.")
