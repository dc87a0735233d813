"""Forms for the activity feed."""

from wtforms import Form, StringField
from wtforms.validators import DataRequired, Length

from barnehage.core.constants import MAX_DESCRIPTION_LENGTH, MAX_TITLE_LENGTH
from barnehage.core.forms import strip_whitespace


class ActivityForm(Form):
    """Payload for posting an activity."""

    title = StringField(
        "Title",
        filters=[strip_whitespace],
        validators=[DataRequired(), Length(max=MAX_TITLE_LENGTH)],
    )
    description = StringField(
        "Description",
        filters=[strip_whitespace],
        validators=[DataRequired(), Length(max=MAX_DESCRIPTION_LENGTH)],
    )
    group = StringField("Group", filters=[strip_whitespace])
    imageUrl = StringField("Image URL")  # noqa: N815
    videoUrl = StringField("Video URL")  # noqa: N815
