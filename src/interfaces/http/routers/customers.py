from __future__ import annotations

from fastapi import APIRouter, Depends, status

from src.application.use_cases.customers import (
    create_customer,
    delete_customer,
    list_customers,
    update_customer,
)
from src.interfaces.http.deps import get_uow, parse_uuid
from src.interfaces.http.schemas.customers import (
    CustomerCreate,
    CustomerResponse,
    CustomerUpdate,
)

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("", response_model=list[CustomerResponse])
async def list_active_customers(uow=Depends(get_uow)):
    items = await list_customers.execute(uow)
    return [CustomerResponse.model_validate(item) for item in items]


@router.get("/all", response_model=list[CustomerResponse])
async def list_all_customers(uow=Depends(get_uow)):
    items = await list_customers.execute(uow, include_inactive=True)
    return [CustomerResponse.model_validate(item) for item in items]


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
async def create(payload: CustomerCreate, uow=Depends(get_uow)):
    created = await create_customer.execute(
        uow,
        create_customer.CreateCustomerInput(
            name=payload.name,
            customer_type=payload.customer_type,
            daily_amount=payload.daily_amount,
        ),
    )
    return CustomerResponse.model_validate(created)


@router.put("/{customer_id}", response_model=CustomerResponse)
async def update(customer_id: str, payload: CustomerUpdate, uow=Depends(get_uow)):
    cid = parse_uuid(customer_id, "customer")
    updated = await update_customer.execute(
        uow,
        cid,
        update_customer.UpdateCustomerInput(
            name=payload.name,
            customer_type=payload.customer_type,
            daily_amount=payload.daily_amount,
            is_active=payload.is_active,
        ),
    )
    return CustomerResponse.model_validate(updated)


@router.delete("/{customer_id}")
async def delete(customer_id: str, uow=Depends(get_uow)) -> dict[str, str]:
    cid = parse_uuid(customer_id, "customer")
    await delete_customer.execute(uow, cid)
    return {"message": "Customer deleted successfully"}
