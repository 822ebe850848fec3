"""Address value object for pickup and drop-off locations."""

from protean import invariant
from protean.core.value_object import BaseValueObject
from protean.exceptions import ValidationError
from protean.fields import String

from logistics.domain import logistics


@logistics.value_object
class Address(BaseValueObject):
    """A free-form postal address, stored trimmed.

    Surrounding whitespace is stripped on construction, so every address
    (new or reloaded) carries the same text and compares by it.
    """

    text = String(required=True, max_length=500)

    def __init__(self, *template, **kwargs):
        if isinstance(kwargs.get("text"), str):
            kwargs["text"] = kwargs["text"].strip()
        super().__init__(*template, **kwargs)

    @invariant.post
    def address_cannot_be_blank(self):
        if not self.text or not self.text.strip():
            raise ValidationError({"address": ["Address is required"]})
