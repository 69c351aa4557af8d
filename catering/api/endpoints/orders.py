# catering/api/endpoints/orders.py
from typing import List
from fastapi import APIRouter, HTTPException, status

from catering.core.config import settings
from catering.core.errors import IntakeError
from catering.core.security import DbDependency
from catering.models.schemas import OrderCreate, OrderDetailResponse, OrderResponse, OrderUpdate
from catering.models.sql_models import Order
from catering.services.crud import CRUDService
from catering.services.order_intake import OrderIntake

router = APIRouter()
orders = CRUDService(Order, "Order")


@router.get("", response_model=List[OrderDetailResponse])
def list_orders(db: DbDependency):
    """All orders, newest first, with customer and payments embedded"""
    return [OrderDetailResponse.model_validate(o) for o in orders.list(db)]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=OrderDetailResponse)
def create_order(payload: OrderCreate, db: DbDependency):
    """
    Run the order intake chain.

    Only the order row is a hard requirement; location, catering-service and
    payment rows that fail to save are logged and skipped unless
    ORDER_INTAKE_ATOMIC is on.
    """
    try:
        result = OrderIntake(db, atomic=settings.ORDER_INTAKE_ATOMIC).run(payload)
    except IntakeError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=e.message)
    return OrderDetailResponse.model_validate(result.order)


@router.get("/{order_id}", response_model=OrderDetailResponse)
def get_order(order_id: int, db: DbDependency):
    return OrderDetailResponse.model_validate(orders.get(db, order_id))


@router.put("/{order_id}", response_model=OrderResponse)
def update_order(order_id: int, payload: OrderUpdate, db: DbDependency):
    # Any status may be written, there is no transition table
    return OrderResponse.model_validate(orders.update(db, order_id, payload))


@router.delete("/{order_id}")
def delete_order(order_id: int, db: DbDependency):
    orders.delete(db, order_id)
    return {"message": "Order deleted successfully"}
