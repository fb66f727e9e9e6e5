from __future__ import annotations

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.customer import Customer


async def execute(uow: UnitOfWork, *, include_inactive: bool = False) -> list[Customer]:
    return await uow.customers.list(include_inactive=include_inactive)
