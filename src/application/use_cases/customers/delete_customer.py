from __future__ import annotations

import logging
from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, customer_id: UUID) -> None:
    """Hard-delete a customer.

    Delivery records pointing at the customer are kept; they stop showing up
    in listings and reports because reads only join active customers.
    """
    existing = await uow.customers.get(customer_id)
    if not existing:
        raise NotFound("Customer not found")
    deleted = await uow.customers.delete(customer_id)
    if not deleted:
        raise NotFound("Customer not found")
    await uow.commit()
    logger.info("Deleted customer %s (%s)", existing.name, customer_id)
