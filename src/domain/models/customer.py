from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

from src.domain.value_objects.customer_type import CustomerType


def name_key(name: str) -> str:
    """Comparison key for customer names: trimmed and casefolded (unicode-aware)."""
    return name.strip().casefold()


def effective_daily_amount(customer_type: CustomerType, daily_amount: Decimal | None) -> Decimal:
    """Milkmen never carry a fixed daily amount."""
    if customer_type is CustomerType.MILKMAN:
        return Decimal("0")
    return daily_amount if daily_amount is not None else Decimal("0")


@dataclass(slots=True)
class Customer:
    id: UUID
    name: str
    customer_type: CustomerType
    daily_amount: Decimal
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_milkman(self) -> bool:
        return self.customer_type is CustomerType.MILKMAN

    @classmethod
    def create(
        cls,
        *,
        name: str,
        customer_type: CustomerType,
        daily_amount: Decimal | None,
    ) -> Customer:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            name=name.strip(),
            customer_type=customer_type,
            daily_amount=effective_daily_amount(customer_type, daily_amount),
            is_active=True,
            created_at=now,
            updated_at=now,
        )
