from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from uuid import UUID

from src.application.errors import NotFound, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.delivery_record import JoinedRecord, normalize_amount

_MUTABLE_FIELDS = ("morning_amount", "evening_amount")


@dataclass(slots=True)
class UpdateRecordInput:
    morning_amount: Decimal | None = None
    evening_amount: Decimal | None = None
    # Names of the fields the caller actually sent; unsent fields keep their value
    provided: set[str] = field(default_factory=lambda: set(_MUTABLE_FIELDS))


async def execute(uow: UnitOfWork, record_id: UUID, payload: UpdateRecordInput) -> JoinedRecord:
    existing = await uow.records.get(record_id)
    if not existing:
        raise NotFound("Record not found")
    customer = await uow.customers.get(existing.customer_id)
    if customer is None or not customer.is_active:
        # Records of deleted or inactive customers are not visible anywhere
        raise NotFound("Record not found")

    data: dict = {}
    for name in _MUTABLE_FIELDS:
        if name not in payload.provided:
            continue
        value = getattr(payload, name)
        if value is not None and value < 0:
            raise ValidationError("Amounts must not be negative")
        data[name] = normalize_amount(value)
    if not data:
        return JoinedRecord(record=existing, customer=customer)

    updated = await uow.records.update(record_id, data)
    if not updated:
        raise NotFound("Record not found")
    await uow.commit()
    return JoinedRecord(record=updated, customer=customer)
