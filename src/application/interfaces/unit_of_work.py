from __future__ import annotations

from typing import Protocol

from src.application.interfaces.repositories.customers import CustomersRepository
from src.application.interfaces.repositories.delivery_records import DeliveryRecordsRepository


class UnitOfWork(Protocol):
    customers: CustomersRepository
    records: DeliveryRecordsRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
