from __future__ import annotations

from datetime import date as DtDate
from decimal import Decimal, InvalidOperation

from fastapi import APIRouter, Depends, Query
from zoneinfo import ZoneInfo

from src.application.errors import ValidationError
from src.application.use_cases.reports import daily_summary, period_report
from src.config.settings import Settings
from src.interfaces.http.deps import get_app_settings, get_local_tz, get_uow, parse_uuid
from src.interfaces.http.schemas.reports import DailySummaryResponse, PeriodReportResponse
from src.utils.dates import to_local_day, today

router = APIRouter(prefix="/reports", tags=["reports"])


def _parse_day(value: str, name: str, tz: ZoneInfo) -> DtDate:
    try:
        return to_local_day(value, tz)
    except ValueError as exc:
        raise ValidationError(f"Invalid {name}, expected YYYY-MM-DD") from exc


@router.get("/summary", response_model=PeriodReportResponse)
async def summary(
    start: str,
    end: str,
    customer_id: str | None = Query(None, alias="customerId"),
    rate: str | None = Query(None),
    settings: Settings = Depends(get_app_settings),
    tz: ZoneInfo = Depends(get_local_tz),
    uow=Depends(get_uow),
):
    rate_value = settings.default_rate_per_liter
    if rate:
        try:
            rate_value = Decimal(rate)
        except InvalidOperation as exc:
            raise ValidationError("Invalid rate") from exc
        if not rate_value.is_finite():
            raise ValidationError("Invalid rate")
    report = await period_report.execute(
        uow,
        start=_parse_day(start, "start", tz),
        end=_parse_day(end, "end", tz),
        rate=rate_value,
        customer_id=parse_uuid(customer_id, "customer") if customer_id else None,
    )
    return PeriodReportResponse.model_validate(report)


@router.get("/daily", response_model=DailySummaryResponse)
async def daily(
    date: str | None = Query(None),
    tz: ZoneInfo = Depends(get_local_tz),
    uow=Depends(get_uow),
):
    day = _parse_day(date, "date", tz) if date else today(tz)
    result = await daily_summary.execute(uow, day)
    return DailySummaryResponse.model_validate(result)
