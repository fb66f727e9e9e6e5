from __future__ import annotations

from datetime import date as DtDate
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.domain.value_objects.customer_type import CustomerType

_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class DailyTotalResponse(BaseModel):
    model_config = _config

    date: DtDate
    quantity: float
    delivered_count: int


class CustomerTotalResponse(BaseModel):
    model_config = _config

    customer_id: UUID
    name: str
    customer_type: CustomerType
    quantity: float
    delivered_count: int
    amount: float


class PeriodReportResponse(BaseModel):
    model_config = _config

    start: DtDate
    end: DtDate
    customer_id: UUID | None
    rate: float
    total_quantity: float
    total_amount: float
    delivered_count: int
    average_daily: float
    daily: list[DailyTotalResponse]
    customers: list[CustomerTotalResponse]


class DailySummaryResponse(BaseModel):
    model_config = _config

    date: DtDate
    total_quantity: float
    record_count: int
    active_customers: int
    pending_customers: int
