from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from zoneinfo import ZoneInfo

from src.application.errors import ValidationError
from src.application.use_cases.records import (
    create_record,
    delete_record,
    list_records,
    update_record,
)
from src.interfaces.http.deps import get_local_tz, get_uow, parse_uuid
from src.interfaces.http.schemas.records import RecordCreate, RecordResponse, RecordUpdate
from src.utils.dates import to_local_day

router = APIRouter(prefix="/records", tags=["records"])


@router.get("", response_model=list[RecordResponse])
async def list_(
    date: str | None = Query(None),
    customer_id: str | None = Query(None, alias="customerId"),
    tz: ZoneInfo = Depends(get_local_tz),
    uow=Depends(get_uow),
):
    day = None
    if date:
        try:
            day = to_local_day(date, tz)
        except ValueError as exc:
            raise ValidationError("Invalid date, expected YYYY-MM-DD") from exc
    cid = parse_uuid(customer_id, "customer") if customer_id else None
    items = await list_records.execute(uow, day=day, customer_id=cid)
    return [RecordResponse.from_joined(item) for item in items]


@router.post("", response_model=RecordResponse, status_code=status.HTTP_201_CREATED)
async def create(payload: RecordCreate, tz: ZoneInfo = Depends(get_local_tz), uow=Depends(get_uow)):
    created = await create_record.execute(
        uow,
        create_record.CreateRecordInput(
            customer_id=parse_uuid(payload.customer_id, "customer"),
            date=to_local_day(payload.date, tz),
            morning_amount=payload.morning_amount,
            evening_amount=payload.evening_amount,
        ),
    )
    return RecordResponse.from_joined(created)


@router.put("/{record_id}", response_model=RecordResponse)
async def update(record_id: str, payload: RecordUpdate, uow=Depends(get_uow)):
    rid = parse_uuid(record_id, "record")
    updated = await update_record.execute(
        uow,
        rid,
        update_record.UpdateRecordInput(
            morning_amount=payload.morning_amount,
            evening_amount=payload.evening_amount,
            provided=set(payload.model_fields_set),
        ),
    )
    return RecordResponse.from_joined(updated)


@router.delete("/{record_id}")
async def delete(record_id: str, uow=Depends(get_uow)) -> dict[str, str]:
    rid = parse_uuid(record_id, "record")
    await delete_record.execute(uow, rid)
    return {"message": "Record deleted successfully"}
