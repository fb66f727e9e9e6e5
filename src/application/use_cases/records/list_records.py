from __future__ import annotations

from datetime import date
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.delivery_record import JoinedRecord


async def execute(
    uow: UnitOfWork,
    *,
    day: date | None = None,
    customer_id: UUID | None = None,
) -> list[JoinedRecord]:
    """Records of active customers, newest first, optionally limited to one day."""
    return await uow.records.list_joined(date_from=day, date_to=day, customer_id=customer_id)
