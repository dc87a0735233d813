"""Helpers for validating JSON payloads with WTForms."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, TypeVar

from wtforms import FloatField, Form
from wtforms.utils import unset_value

from barnehage.errors import ValidationError

FormT = TypeVar("FormT", bound=Form)


def strip_whitespace(value: Any) -> Any:
    """Field filter that trims text, coercing JSON scalars to strings."""
    if value is None:
        return None
    return str(value).strip()


class NumberField(FloatField):
    """Numeric field that keeps JSON numbers as sent.

    Whole numbers stay ints and fractions stay floats. Strings, booleans and
    non-finite values are rejected.
    """

    def process_data(self, value):
        """Accept only finite JSON numbers."""
        if value is None or value is unset_value:
            self.data = None
        elif (
            isinstance(value, (int, float))
            and not isinstance(value, bool)
            and math.isfinite(value)
        ):
            self.data = value
        else:
            self.data = None
            raise ValueError(self.gettext("Not a valid number."))


def load_form(form_class: type[FormT], payload: Any, partial: bool = False) -> FormT:
    """Build and validate a form from a decoded JSON body.

    With ``partial`` only the fields present in the payload are checked,
    which is how updates are validated.

    Raises:
        ValidationError: If the payload is not an object or a field is invalid.
    """
    if not isinstance(payload, Mapping):
        raise ValidationError("Request body must be a JSON object.")

    form = form_class(data=payload)
    form.validate()
    errors = {
        name: messages
        for name, messages in form.errors.items()
        if not partial or name in payload
    }
    if errors:
        name, messages = next(iter(errors.items()))
        label = form[name].label.text
        raise ValidationError(f"{label}: {messages[0]}")
    return form


def provided_data(form: Form, payload: Mapping[str, Any]) -> dict[str, Any]:
    """Return the cleaned values of the fields present in the payload."""
    return {field.name: field.data for field in form if field.name in payload}
