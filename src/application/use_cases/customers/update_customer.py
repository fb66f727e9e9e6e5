from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from src.application.errors import DUPLICATE_CUSTOMER_NAME, NotFound, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.customer import Customer, effective_daily_amount
from src.domain.value_objects.customer_type import CustomerType

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UpdateCustomerInput:
    name: str | None = None
    customer_type: CustomerType | None = None
    daily_amount: Decimal | None = None
    is_active: bool | None = None


async def execute(uow: UnitOfWork, customer_id: UUID, payload: UpdateCustomerInput) -> Customer:
    existing = await uow.customers.get(customer_id)
    if not existing:
        raise NotFound("Customer not found")

    data: dict = {}
    if payload.name is not None:
        name = payload.name.strip()
        if not name:
            raise ValidationError("Customer name is required")
        if name != existing.name:
            if await uow.customers.find_by_name(name, exclude_id=customer_id):
                logger.info("Rejected rename of %s to duplicate name %r", customer_id, name)
                raise ValidationError(DUPLICATE_CUSTOMER_NAME)
            data["name"] = name
    if payload.customer_type is not None:
        data["customer_type"] = payload.customer_type
    if payload.daily_amount is not None and payload.daily_amount < 0:
        raise ValidationError("dailyAmount must not be negative")
    if payload.is_active is not None:
        data["is_active"] = payload.is_active

    # The milkman rule applies to the resulting combination, not only to the fields sent
    customer_type = payload.customer_type or existing.customer_type
    requested_amount = (
        payload.daily_amount if payload.daily_amount is not None else existing.daily_amount
    )
    daily_amount = effective_daily_amount(customer_type, requested_amount)
    if daily_amount != existing.daily_amount:
        data["daily_amount"] = daily_amount

    if not data:
        return existing
    updated = await uow.customers.update(customer_id, data)
    if not updated:
        raise NotFound("Customer not found")
    await uow.commit()
    return updated
