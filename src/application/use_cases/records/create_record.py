from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.delivery_record import DeliveryRecord, JoinedRecord

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateRecordInput:
    customer_id: UUID
    date: date
    morning_amount: Decimal | None = None
    evening_amount: Decimal | None = None


async def execute(uow: UnitOfWork, payload: CreateRecordInput) -> JoinedRecord:
    # Lookup and insert are separate statements; a customer deactivated in between
    # still gets this record, which is then hidden at read time.
    customer = await uow.customers.get(payload.customer_id)
    if customer is None or not customer.is_active:
        raise ValidationError("Customer not found or inactive")
    for amount in (payload.morning_amount, payload.evening_amount):
        if amount is not None and amount < 0:
            raise ValidationError("Amounts must not be negative")

    record = DeliveryRecord.create(
        customer_id=customer.id,
        date=payload.date,
        morning_amount=payload.morning_amount,
        evening_amount=payload.evening_amount,
    )
    created = await uow.records.add(record)
    await uow.commit()
    logger.info("Recorded delivery %s for %s on %s", created.id, customer.name, created.date)
    return JoinedRecord(record=created, customer=customer)
