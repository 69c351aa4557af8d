# catering/api/endpoints/customers.py
from typing import List
from fastapi import APIRouter, HTTPException, status

from catering.core.logging import get_logger
from catering.core.security import DbDependency
from catering.models.schemas import CustomerCreate, CustomerLookup, CustomerResponse, CustomerUpdate
from catering.models.sql_models import Customer
from catering.services.crud import CRUDService
from catering.services.order_intake import find_customer_by_email

router = APIRouter()
logger = get_logger(__name__)
customers = CRUDService(Customer, "Customer")


@router.get("", response_model=List[CustomerResponse])
def list_customers(db: DbDependency):
    return [CustomerResponse.model_validate(c) for c in customers.list(db)]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CustomerResponse)
def create_customer(payload: CustomerCreate, db: DbDependency):
    return CustomerResponse.model_validate(customers.create(db, payload))


@router.post("/by-email")
def get_customer_by_email(payload: CustomerLookup, db: DbDependency):
    """Exact email lookup, used by the storefront before login"""
    if not payload.email:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email is required")

    customer = find_customer_by_email(db, payload.email)
    if not customer:
        logger.info("Customer not found for %s", payload.email)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found")

    return {
        "id": customer.id,
        "name": customer.name,
        "email": customer.email,
        "phone": customer.phone,
        "address": customer.address,
    }


@router.get("/{customer_id}", response_model=CustomerResponse)
def get_customer(customer_id: int, db: DbDependency):
    return CustomerResponse.model_validate(customers.get(db, customer_id))


@router.put("/{customer_id}", response_model=CustomerResponse)
def update_customer(customer_id: int, payload: CustomerUpdate, db: DbDependency):
    return CustomerResponse.model_validate(customers.update(db, customer_id, payload))


@router.delete("/{customer_id}")
def delete_customer(customer_id: int, db: DbDependency):
    # Orders pointing at this customer keep their customer_id
    customers.delete(db, customer_id)
    return {"message": "Customer deleted successfully"}
