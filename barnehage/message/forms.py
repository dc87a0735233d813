"""Forms for parent-staff messaging."""

from wtforms import Form, IntegerField, StringField
from wtforms.validators import AnyOf, DataRequired

from barnehage.core.constants import SENDER_PARENT, SENDER_STAFF
from barnehage.core.forms import strip_whitespace


class MessageForm(Form):
    """Payload for sending a message."""

    parentId = IntegerField("Parent", validators=[DataRequired()])  # noqa: N815
    content = StringField(
        "Message content", filters=[strip_whitespace], validators=[DataRequired()]
    )
    sender = StringField(
        "Sender",
        default=SENDER_PARENT,
        validators=[AnyOf([SENDER_PARENT, SENDER_STAFF])],
    )
