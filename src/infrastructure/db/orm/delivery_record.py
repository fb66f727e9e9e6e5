from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import DECIMAL, Date, DateTime, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class DeliveryRecordORM(Base):
    __tablename__ = "delivery_records"

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    # Weak reference: customers can be hard-deleted while their records remain
    customer_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), index=True, nullable=False)
    date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    morning_amount: Mapped[Decimal | None] = mapped_column(DECIMAL(10, 3), nullable=True)
    evening_amount: Mapped[Decimal | None] = mapped_column(DECIMAL(10, 3), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
