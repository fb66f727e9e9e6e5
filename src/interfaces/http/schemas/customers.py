from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.domain.value_objects.customer_type import CustomerType


class CustomerCreate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(min_length=1, max_length=255)
    customer_type: CustomerType
    daily_amount: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=3)


class CustomerUpdate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str | None = Field(None, min_length=1, max_length=255)
    customer_type: CustomerType | None = None
    daily_amount: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=3)
    is_active: bool | None = None


class CustomerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: UUID
    name: str
    customer_type: CustomerType
    daily_amount: float
    is_active: bool
    created_at: datetime
    updated_at: datetime
