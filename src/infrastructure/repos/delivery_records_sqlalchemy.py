from __future__ import annotations

from datetime import date, datetime, timezone
from uuid import UUID

from sqlalchemy import and_, delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import StoreError
from src.application.interfaces.repositories.delivery_records import DeliveryRecordsRepository
from src.domain.models.delivery_record import DeliveryRecord, JoinedRecord
from src.infrastructure.db.orm.customer import CustomerORM
from src.infrastructure.db.orm.delivery_record import DeliveryRecordORM
from src.infrastructure.repos.customers_sqlalchemy import customer_to_domain


class DeliveryRecordsSQLAlchemyRepository(DeliveryRecordsRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: DeliveryRecordORM) -> DeliveryRecord:
        return DeliveryRecord(
            id=orm.id,
            customer_id=orm.customer_id,
            date=orm.date,
            morning_amount=orm.morning_amount,
            evening_amount=orm.evening_amount,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def add(self, record: DeliveryRecord) -> DeliveryRecord:
        orm = DeliveryRecordORM(
            id=record.id,
            customer_id=record.customer_id,
            date=record.date,
            morning_amount=record.morning_amount,
            evening_amount=record.evening_amount,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except SQLAlchemyError as exc:
            raise StoreError("Failed to create record") from exc
        return self._to_domain(orm)

    async def get(self, record_id: UUID) -> DeliveryRecord | None:
        orm = await self.session.get(DeliveryRecordORM, record_id)
        return self._to_domain(orm) if orm else None

    async def list_joined(
        self,
        *,
        date_from: date | None = None,
        date_to: date | None = None,
        customer_id: UUID | None = None,
    ) -> list[JoinedRecord]:
        # Inner join: records of deleted or inactive customers drop out here
        conds = [CustomerORM.is_active.is_(True)]
        if date_from:
            conds.append(DeliveryRecordORM.date >= date_from)
        if date_to:
            conds.append(DeliveryRecordORM.date <= date_to)
        if customer_id is not None:
            conds.append(DeliveryRecordORM.customer_id == customer_id)
        stmt = (
            select(DeliveryRecordORM, CustomerORM)
            .join(CustomerORM, CustomerORM.id == DeliveryRecordORM.customer_id)
            .where(and_(*conds))
            .order_by(DeliveryRecordORM.date.desc(), DeliveryRecordORM.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [
            JoinedRecord(record=self._to_domain(rec), customer=customer_to_domain(cust))
            for rec, cust in result.all()
        ]

    async def update(self, record_id: UUID, data: dict) -> DeliveryRecord | None:
        orm = await self.session.get(DeliveryRecordORM, record_id)
        if orm is None:
            return None
        for key, value in data.items():
            setattr(orm, key, value)
        orm.updated_at = datetime.now(timezone.utc)
        try:
            await self.session.flush()
        except SQLAlchemyError as exc:
            raise StoreError("Failed to update record") from exc
        return self._to_domain(orm)

    async def delete(self, record_id: UUID) -> bool:
        result = await self.session.execute(
            delete(DeliveryRecordORM).where(DeliveryRecordORM.id == record_id)
        )
        return result.rowcount > 0
