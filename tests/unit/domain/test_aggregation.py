from __future__ import annotations

from datetime import date
from decimal import Decimal

from src.domain.models.customer import Customer
from src.domain.models.delivery_record import DeliveryRecord, JoinedRecord
from src.domain.services import aggregation
from src.domain.value_objects.customer_type import CustomerType


def _regular(amount: str = "1", name: str = "Raju") -> Customer:
    return Customer.create(name=name, customer_type=CustomerType.REGULAR, daily_amount=Decimal(amount))


def _milkman(name: str = "Mohan") -> Customer:
    return Customer.create(name=name, customer_type=CustomerType.MILKMAN, daily_amount=None)


def _joined(customer: Customer, day: date, morning=None, evening=None) -> JoinedRecord:
    record = DeliveryRecord.create(
        customer_id=customer.id,
        date=day,
        morning_amount=Decimal(morning) if morning is not None else None,
        evening_amount=Decimal(evening) if evening is not None else None,
    )
    return JoinedRecord(record=record, customer=customer)


def test_regular_quantity_defaults_to_daily_amount():
    customer = _regular("1.5")
    absent = _joined(customer, date(2024, 1, 1))
    zero = _joined(customer, date(2024, 1, 1), morning="0")
    override = _joined(customer, date(2024, 1, 1), morning="3", evening="4")
    assert aggregation.record_quantity(absent.record, customer) == Decimal("1.5")
    assert aggregation.record_quantity(zero.record, customer) == Decimal("1.5")
    assert aggregation.record_quantity(override.record, customer) == Decimal("3")


def test_milkman_quantity_sums_both_rounds():
    customer = _milkman()
    both = _joined(customer, date(2024, 1, 1), morning="2", evening="1.5")
    none = _joined(customer, date(2024, 1, 1))
    assert aggregation.record_quantity(both.record, customer) == Decimal("3.5")
    assert aggregation.record_quantity(none.record, customer) == Decimal("0")


def test_milkman_has_no_daily_amount():
    customer = Customer.create(
        name="Mohan", customer_type=CustomerType.MILKMAN, daily_amount=Decimal("50")
    )
    assert customer.daily_amount == 0


def test_range_membership_is_inclusive_and_inverted_range_is_empty():
    start, end = date(2024, 1, 1), date(2024, 1, 31)
    assert aggregation.in_range(start, start, end)
    assert aggregation.in_range(end, start, end)
    assert not aggregation.in_range(date(2024, 2, 1), start, end)
    assert not aggregation.in_range(date(2024, 1, 15), end, start)


def test_period_report():
    raju, mohan = _regular("2"), _milkman()
    items = [
        _joined(raju, date(2024, 1, 3)),
        _joined(mohan, date(2024, 1, 3), morning="1", evening="2"),
        _joined(raju, date(2024, 2, 1)),
    ]
    report = aggregation.build_period_report(
        items, start=date(2024, 1, 1), end=date(2024, 1, 31), rate=Decimal("10")
    )
    assert report.total_quantity == Decimal("5")
    assert report.total_amount == Decimal("50.00")
    assert report.delivered_count == 2
    assert report.average_daily == Decimal("0.17")
    assert [(d.date, d.quantity, d.delivered_count) for d in report.daily] == [
        (date(2024, 1, 3), Decimal("5"), 2)
    ]
    assert [c.name for c in report.customers] == ["Mohan", "Raju"]


def test_zero_or_missing_rate_suppresses_amount():
    assert aggregation.total_amount(Decimal("5"), None) == 0
    assert aggregation.total_amount(Decimal("5"), Decimal("0")) == 0
    assert aggregation.total_amount(Decimal("2.5"), Decimal("3.333")) == Decimal("8.33")


def test_customer_filter():
    raju, shyam = _regular(name="Raju"), _regular("3", name="Shyam")
    items = [_joined(raju, date(2024, 1, 3)), _joined(shyam, date(2024, 1, 3))]
    report = aggregation.build_period_report(
        items, start=date(2024, 1, 1), end=date(2024, 1, 31), customer_id=shyam.id
    )
    assert report.total_quantity == Decimal("3")


def test_daily_summary():
    raju, shyam = _regular(name="Raju"), _regular(name="Shyam")
    day = date(2024, 1, 10)
    items = [_joined(raju, day, morning="2"), _joined(raju, day)]
    summary = aggregation.build_daily_summary(day, items, [raju, shyam])
    assert summary.total_quantity == Decimal("3")
    assert summary.record_count == 2
    assert summary.pending_customers == 1
