"""
Meal-set checkout behind POST /api/meal-set-orders.

Differs from the generic intake: the customer comes from the authenticated
identity and must exist (or be created) before anything else, the total is
computed here from the meal set's price, and no location or catering-service
rows are written. The payment row stays best effort.
"""
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from catering.core.errors import CustomerResolutionError, OrderCreationError
from catering.core.logging import get_logger
from catering.models.schemas import Identity, MealSetOrderCreate
from catering.models.sql_models import Customer, MealSet, Order, Payment
from catering.services.order_intake import OrderIntake, find_customer_by_email, make_transaction_id

logger = get_logger(__name__)


def display_name(identity: Identity) -> str:
    meta = identity.user_metadata or {}
    if meta.get("full_name"):
        return meta["full_name"]
    if meta.get("name"):
        return meta["name"]
    if identity.email:
        return identity.email.split("@")[0]
    return "Unknown"


@dataclass
class MealSetOrderResult:
    order: Order
    meal_set: MealSet
    payment: Optional[Payment] = None


class MealSetOrderIntake(OrderIntake):

    def get_meal_set(self, meal_set_id: int) -> MealSet:
        try:
            meal_set = self.db.query(MealSet).filter(MealSet.id == meal_set_id).first()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Error fetching meal set %s", meal_set_id)
            meal_set = None
        if not meal_set:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Meal set not found")
        return meal_set

    def ensure_customer(self, identity: Identity, payload: MealSetOrderCreate) -> Customer:
        existing = None
        try:
            if identity.email:
                existing = find_customer_by_email(self.db, identity.email)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Error fetching customer %s", identity.email)
            raise CustomerResolutionError("Database error", step="customer") from e
        if existing:
            return existing

        customer = Customer(
            name=display_name(identity),
            email=identity.email,
            phone=payload.contact_number,
            address=payload.delivery_address,
        )
        try:
            return self._save(customer)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Error creating customer %s", identity.email)
            raise CustomerResolutionError("Failed to create customer", step="customer") from e

    def run(self, payload: MealSetOrderCreate, identity: Identity) -> MealSetOrderResult:
        logger.info("Creating meal set order for %s (meal set %s)", identity.email, payload.meal_set_id)
        meal_set = self.get_meal_set(payload.meal_set_id)
        customer = self.ensure_customer(identity, payload)

        order = Order(
            customer_id=customer.id,
            customer_name=customer.name,
            customer_email=customer.email,
            order_type="meal_set",
            meal_set_id=meal_set.id,
            meal_set_name=meal_set.name,
            quantity=payload.quantity,
            total_amount=meal_set.price * payload.quantity,
            status="pending",
            event_type=payload.event_type,
            event_date=payload.event_date,
            order_date=date.today(),
            delivery_date=payload.event_date,
            delivery_address=payload.delivery_address,
            contact_person=payload.contact_person or customer.name,
            contact_number=payload.contact_number,
            payment_method=payload.payment_method,
            special_instructions=payload.special_requests,
        )
        try:
            order = self._save(order)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Error creating meal set order")
            raise OrderCreationError("Failed to create order", step="order") from e

        now = datetime.now(timezone.utc)
        payment = self._best_effort(
            "payment",
            Payment(
                order_id=order.id,
                customer_id=customer.id,
                customer_name=customer.name,
                amount=order.total_amount,
                payment_method=payload.payment_method,
                status="pending",
                transaction_id=make_transaction_id(order.id, now),
                payment_date=now,
            ),
        )

        if self.atomic:
            try:
                self.db.commit()
            except SQLAlchemyError as e:
                self.db.rollback()
                raise OrderCreationError("Failed to create order", step="order") from e

        logger.info("Meal set order %s created", order.id)
        return MealSetOrderResult(order=order, meal_set=meal_set, payment=payment)
