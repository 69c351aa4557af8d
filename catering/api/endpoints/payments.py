# catering/api/endpoints/payments.py
from typing import List
from fastapi import APIRouter, status

from catering.core.security import DbDependency
from catering.models.schemas import PaymentCreate, PaymentDetailResponse, PaymentResponse, PaymentUpdate
from catering.models.sql_models import Payment
from catering.services.crud import CRUDService

router = APIRouter()
payments = CRUDService(Payment, "Payment")


@router.get("", response_model=List[PaymentResponse])
def list_payments(db: DbDependency):
    return [PaymentResponse.model_validate(p) for p in payments.list(db)]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=PaymentResponse)
def create_payment(payload: PaymentCreate, db: DbDependency):
    return PaymentResponse.model_validate(payments.create(db, payload))


@router.get("/{payment_id}", response_model=PaymentDetailResponse)
def get_payment(payment_id: int, db: DbDependency):
    return PaymentDetailResponse.model_validate(payments.get(db, payment_id))


@router.put("/{payment_id}", response_model=PaymentResponse)
def update_payment(payment_id: int, payload: PaymentUpdate, db: DbDependency):
    # Bookkeeping only, e.g. pending -> paid once the admin confirms
    return PaymentResponse.model_validate(payments.update(db, payment_id, payload))


@router.delete("/{payment_id}")
def delete_payment(payment_id: int, db: DbDependency):
    payments.delete(db, payment_id)
    return {"message": "Payment deleted successfully"}
