from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import DUPLICATE_CUSTOMER_NAME, StoreError, ValidationError
from src.application.interfaces.repositories.customers import CustomersRepository
from src.domain.models.customer import Customer, name_key
from src.domain.value_objects.customer_type import CustomerType
from src.infrastructure.db.orm.customer import CustomerORM


def customer_to_domain(orm: CustomerORM) -> Customer:
    return Customer(
        id=orm.id,
        name=orm.name,
        customer_type=CustomerType(orm.customer_type),
        daily_amount=orm.daily_amount,
        is_active=orm.is_active,
        created_at=orm.created_at,
        updated_at=orm.updated_at,
    )


class CustomersSQLAlchemyRepository(CustomersRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _flush(self) -> None:
        try:
            await self.session.flush()
        except IntegrityError as exc:
            # Unique constraint on name_key caught a duplicate the pre-check missed
            message = str(exc.orig).lower()
            if "name_key" in message or "duplicate key" in message:
                raise ValidationError(DUPLICATE_CUSTOMER_NAME) from exc
            raise StoreError("Failed to save customer") from exc
        except SQLAlchemyError as exc:
            raise StoreError("Failed to save customer") from exc

    async def add(self, customer: Customer) -> Customer:
        orm = CustomerORM(
            id=customer.id,
            name=customer.name,
            name_key=name_key(customer.name),
            customer_type=customer.customer_type.value,
            daily_amount=customer.daily_amount,
            is_active=customer.is_active,
            created_at=customer.created_at,
            updated_at=customer.updated_at,
        )
        self.session.add(orm)
        await self._flush()
        return customer_to_domain(orm)

    async def get(self, customer_id: UUID) -> Customer | None:
        orm = await self.session.get(CustomerORM, customer_id)
        return customer_to_domain(orm) if orm else None

    async def list(self, *, include_inactive: bool = False) -> list[Customer]:
        stmt = select(CustomerORM).order_by(CustomerORM.name.asc())
        if not include_inactive:
            stmt = stmt.where(CustomerORM.is_active.is_(True))
        result = await self.session.execute(stmt)
        return [customer_to_domain(r) for r in result.scalars().all()]

    async def find_by_name(self, name: str, *, exclude_id: UUID | None = None) -> Customer | None:
        stmt = select(CustomerORM).where(CustomerORM.name_key == name_key(name))
        if exclude_id is not None:
            stmt = stmt.where(CustomerORM.id != exclude_id)
        result = await self.session.execute(stmt.limit(1))
        orm = result.scalar_one_or_none()
        return customer_to_domain(orm) if orm else None

    async def update(self, customer_id: UUID, data: dict) -> Customer | None:
        orm = await self.session.get(CustomerORM, customer_id)
        if orm is None:
            return None
        for key, value in data.items():
            if key == "customer_type":
                value = CustomerType(value).value
            setattr(orm, key, value)
            if key == "name":
                orm.name_key = name_key(value)
        orm.updated_at = datetime.now(timezone.utc)
        await self._flush()
        return customer_to_domain(orm)

    async def delete(self, customer_id: UUID) -> bool:
        result = await self.session.execute(
            delete(CustomerORM).where(CustomerORM.id == customer_id)
        )
        return result.rowcount > 0
