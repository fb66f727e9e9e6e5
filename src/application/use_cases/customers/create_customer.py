from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from src.application.errors import DUPLICATE_CUSTOMER_NAME, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.customer import Customer
from src.domain.value_objects.customer_type import CustomerType

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateCustomerInput:
    name: str
    customer_type: CustomerType
    daily_amount: Decimal | None = None


async def execute(uow: UnitOfWork, payload: CreateCustomerInput) -> Customer:
    name = payload.name.strip()
    if not name:
        raise ValidationError("Customer name is required")
    if payload.customer_type is CustomerType.REGULAR and payload.daily_amount is None:
        raise ValidationError("dailyAmount is required for regular customers")
    if payload.daily_amount is not None and payload.daily_amount < 0:
        raise ValidationError("dailyAmount must not be negative")

    if await uow.customers.find_by_name(name):
        logger.info("Rejected duplicate customer name %r", name)
        raise ValidationError(DUPLICATE_CUSTOMER_NAME)

    customer = Customer.create(
        name=name,
        customer_type=payload.customer_type,
        daily_amount=payload.daily_amount,
    )
    created = await uow.customers.add(customer)
    await uow.commit()
    logger.info("Created %s customer %s (%s)", created.customer_type.value, created.name, created.id)
    return created
