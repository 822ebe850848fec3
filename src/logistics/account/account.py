"""Account aggregate: shippers who place orders and couriers who deliver them."""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.core.aggregate import BaseAggregate
from protean.exceptions import ValidationError
from protean.fields import DateTime, String

from logistics.domain import logistics


class AccountRole(Enum):
    SHIPPER = "SHIPPER"
    COURIER = "COURIER"

    @property
    def is_shipper(self) -> bool:
        return self is AccountRole.SHIPPER

    @property
    def is_courier(self) -> bool:
        return self is AccountRole.COURIER


@logistics.aggregate
class Account(BaseAggregate):
    """A participant on the platform, acting either as a shipper or a courier.

    The name is stored trimmed, whichever way the account is built.
    """

    name = String(required=True, max_length=255)
    role = String(required=True, choices=AccountRole)
    created_at = DateTime()

    def __init__(self, *template, **kwargs):
        if isinstance(kwargs.get("name"), str):
            kwargs["name"] = kwargs["name"].strip()
        super().__init__(*template, **kwargs)

    @invariant.post
    def name_cannot_be_blank(self):
        if not self.name or not self.name.strip():
            raise ValidationError({"name": ["Name is required"]})

    @classmethod
    def create(cls, name: str, role: str):
        return cls(
            name=name,
            role=role,
            created_at=datetime.now(UTC),
        )

    def is_shipper(self) -> bool:
        return AccountRole(self.role).is_shipper

    def is_courier(self) -> bool:
        return AccountRole(self.role).is_courier
