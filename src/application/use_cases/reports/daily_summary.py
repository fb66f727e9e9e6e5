from __future__ import annotations

from datetime import date

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.services.aggregation import DailySummary, build_daily_summary


async def execute(uow: UnitOfWork, day: date) -> DailySummary:
    items = await uow.records.list_joined(date_from=day, date_to=day)
    customers = await uow.customers.list()
    return build_daily_summary(day, items, customers)
