from __future__ import annotations

from datetime import date as DtDate
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.domain.models.delivery_record import JoinedRecord
from src.domain.services.aggregation import record_quantity
from src.domain.value_objects.customer_type import CustomerType


class RecordCreate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    customer_id: str
    # 'YYYY-MM-DD' or a full ISO timestamp
    date: DtDate | datetime
    morning_amount: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=3)
    evening_amount: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=3)


class RecordUpdate(BaseModel):
    """Only the amounts can change; customerId and date are ignored if sent."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    morning_amount: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=3)
    evening_amount: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=3)


class RecordCustomer(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: UUID
    name: str
    customer_type: CustomerType
    daily_amount: float


class RecordResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: UUID
    customer_id: UUID
    customer: RecordCustomer
    customer_name: str
    date: DtDate
    morning_amount: float | None
    evening_amount: float | None
    quantity: float
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_joined(cls, item: JoinedRecord) -> RecordResponse:
        record, customer = item.record, item.customer
        return cls(
            id=record.id,
            customer_id=record.customer_id,
            customer=RecordCustomer.model_validate(customer),
            customer_name=customer.name,
            date=record.date,
            morning_amount=record.morning_amount,
            evening_amount=record.evening_amount,
            quantity=record_quantity(record, customer),
            created_at=record.created_at,
            updated_at=record.updated_at,
        )
