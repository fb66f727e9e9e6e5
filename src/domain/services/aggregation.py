from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from uuid import UUID

from src.domain.models.customer import Customer
from src.domain.models.delivery_record import DeliveryRecord, JoinedRecord
from src.domain.value_objects.customer_type import CustomerType

ZERO = Decimal("0")


def round2(x: Decimal) -> Decimal:
    return x.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def record_quantity(record: DeliveryRecord, customer: Customer) -> Decimal:
    """Liters delivered by one record.

    Milkmen deliver whatever was entered for the morning and evening rounds.
    Regular customers get their fixed daily amount unless a positive morning
    amount overrides it; the evening amount is ignored for them.
    """
    morning = record.morning_amount
    if customer.customer_type is CustomerType.MILKMAN:
        return (morning or ZERO) + (record.evening_amount or ZERO)
    if morning is not None and morning > 0:
        return morning
    return customer.daily_amount


def in_range(day: date, start: date, end: date) -> bool:
    # Inclusive on both ends; an inverted range matches nothing
    return start <= day <= end


def filter_period(
    items: Iterable[JoinedRecord],
    start: date,
    end: date,
    customer_id: UUID | None = None,
) -> list[JoinedRecord]:
    return [
        item
        for item in items
        if in_range(item.record.date, start, end)
        and (customer_id is None or item.customer.id == customer_id)
    ]


def total_quantity(items: Iterable[JoinedRecord]) -> Decimal:
    return sum((record_quantity(i.record, i.customer) for i in items), ZERO)


def total_amount(quantity: Decimal, rate: Decimal | None) -> Decimal:
    if rate is None or rate <= 0:
        return ZERO
    return round2(quantity * rate)


def average_daily(quantity: Decimal, start: date, end: date) -> Decimal:
    days = max(1, (end - start).days)
    return round2(quantity / days)


@dataclass(slots=True)
class DailyTotal:
    date: date
    quantity: Decimal
    delivered_count: int


@dataclass(slots=True)
class CustomerTotal:
    customer_id: UUID
    name: str
    customer_type: CustomerType
    quantity: Decimal
    delivered_count: int
    amount: Decimal


def daily_breakdown(items: Iterable[JoinedRecord]) -> list[DailyTotal]:
    by_day: dict[date, DailyTotal] = {}
    for item in items:
        day = item.record.date
        bucket = by_day.get(day)
        if bucket is None:
            bucket = by_day[day] = DailyTotal(date=day, quantity=ZERO, delivered_count=0)
        bucket.quantity += record_quantity(item.record, item.customer)
        bucket.delivered_count += 1
    return [by_day[d] for d in sorted(by_day)]


def customer_breakdown(items: Iterable[JoinedRecord], rate: Decimal | None) -> list[CustomerTotal]:
    by_customer: dict[UUID, CustomerTotal] = {}
    for item in items:
        c = item.customer
        bucket = by_customer.get(c.id)
        if bucket is None:
            bucket = by_customer[c.id] = CustomerTotal(
                customer_id=c.id,
                name=c.name,
                customer_type=c.customer_type,
                quantity=ZERO,
                delivered_count=0,
                amount=ZERO,
            )
        bucket.quantity += record_quantity(item.record, c)
        bucket.delivered_count += 1
    rows = sorted(by_customer.values(), key=lambda r: r.name.lower())
    for row in rows:
        row.amount = total_amount(row.quantity, rate)
    return rows


@dataclass(slots=True)
class PeriodReport:
    start: date
    end: date
    customer_id: UUID | None
    rate: Decimal
    total_quantity: Decimal
    total_amount: Decimal
    delivered_count: int
    average_daily: Decimal
    daily: list[DailyTotal] = field(default_factory=list)
    customers: list[CustomerTotal] = field(default_factory=list)


def build_period_report(
    items: Iterable[JoinedRecord],
    *,
    start: date,
    end: date,
    rate: Decimal | None = None,
    customer_id: UUID | None = None,
) -> PeriodReport:
    selected = filter_period(items, start, end, customer_id)
    quantity = total_quantity(selected)
    effective_rate = rate if rate is not None and rate > 0 else ZERO
    return PeriodReport(
        start=start,
        end=end,
        customer_id=customer_id,
        rate=effective_rate,
        total_quantity=quantity,
        total_amount=total_amount(quantity, effective_rate),
        delivered_count=len(selected),
        average_daily=average_daily(quantity, start, end),
        daily=daily_breakdown(selected),
        customers=customer_breakdown(selected, effective_rate),
    )


@dataclass(slots=True)
class DailySummary:
    date: date
    total_quantity: Decimal
    record_count: int
    active_customers: int
    pending_customers: int


def build_daily_summary(
    day: date, items: Iterable[JoinedRecord], active_customers: Iterable[Customer]
) -> DailySummary:
    todays = [i for i in items if i.record.date == day]
    served = {i.customer.id for i in todays}
    active = list(active_customers)
    return DailySummary(
        date=day,
        total_quantity=total_quantity(todays),
        record_count=len(todays),
        active_customers=len(active),
        pending_customers=sum(1 for c in active if c.id not in served),
    )
