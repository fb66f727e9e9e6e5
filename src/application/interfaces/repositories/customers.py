from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.customer import Customer


class CustomersRepository(Protocol):
    async def add(self, customer: Customer) -> Customer: ...
    async def get(self, customer_id: UUID) -> Customer | None: ...
    async def list(self, *, include_inactive: bool = False) -> list[Customer]: ...
    async def find_by_name(
        self, name: str, *, exclude_id: UUID | None = None
    ) -> Customer | None: ...
    async def update(self, customer_id: UUID, data: dict) -> Customer | None: ...
    async def delete(self, customer_id: UUID) -> bool: ...
