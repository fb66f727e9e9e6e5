from __future__ import annotations

from datetime import date
from typing import Protocol
from uuid import UUID

from src.domain.models.delivery_record import DeliveryRecord, JoinedRecord


class DeliveryRecordsRepository(Protocol):
    async def add(self, record: DeliveryRecord) -> DeliveryRecord: ...
    async def get(self, record_id: UUID) -> DeliveryRecord | None: ...
    async def list_joined(
        self,
        *,
        date_from: date | None = None,
        date_to: date | None = None,
        customer_id: UUID | None = None,
    ) -> list[JoinedRecord]: ...
    async def update(self, record_id: UUID, data: dict) -> DeliveryRecord | None: ...
    async def delete(self, record_id: UUID) -> bool: ...
