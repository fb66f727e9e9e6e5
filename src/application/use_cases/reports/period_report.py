from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.services.aggregation import PeriodReport, build_period_report


async def execute(
    uow: UnitOfWork,
    *,
    start: date,
    end: date,
    rate: Decimal | None = None,
    customer_id: UUID | None = None,
) -> PeriodReport:
    if start > end:
        # Inverted range: nothing can match, skip the query
        items = []
    else:
        items = await uow.records.list_joined(
            date_from=start, date_to=end, customer_id=customer_id
        )
    return build_period_report(
        items, start=start, end=end, rate=rate, customer_id=customer_id
    )
