from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

from src.domain.models.customer import Customer


def normalize_amount(value: Decimal | None) -> Decimal | None:
    # A zero amount is stored as "not entered"
    if value is None or value == 0:
        return None
    return value


@dataclass(slots=True)
class DeliveryRecord:
    id: UUID
    customer_id: UUID
    date: date
    morning_amount: Decimal | None = None
    evening_amount: Decimal | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        *,
        customer_id: UUID,
        date: date,
        morning_amount: Decimal | None = None,
        evening_amount: Decimal | None = None,
    ) -> DeliveryRecord:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            customer_id=customer_id,
            date=date,
            morning_amount=normalize_amount(morning_amount),
            evening_amount=normalize_amount(evening_amount),
            created_at=now,
            updated_at=now,
        )


@dataclass(slots=True)
class JoinedRecord:
    """A delivery record resolved against its (active) customer."""

    record: DeliveryRecord
    customer: Customer
