from __future__ import annotations

import logging
from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, record_id: UUID) -> None:
    existing = await uow.records.get(record_id)
    if not existing:
        raise NotFound("Record not found")
    customer = await uow.customers.get(existing.customer_id)
    if customer is None or not customer.is_active:
        # Records of deleted or inactive customers are not visible anywhere
        raise NotFound("Record not found")
    deleted = await uow.records.delete(record_id)
    if not deleted:
        raise NotFound("Record not found")
    await uow.commit()
    logger.info("Deleted record %s", record_id)
