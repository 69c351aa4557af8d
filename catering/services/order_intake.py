"""
Order intake chain behind POST /api/orders.

Steps, in order:
    1. resolve the customer by exact email (or create one)
    2. record a Location row for the delivery address
    3. create the Order row                      (fatal on failure)
    4. record a CateringService row for events   (best effort)
    5. record a pending Payment row              (best effort)

Later steps need ids produced by earlier ones, so they run one after the
other. By default every row is committed on its own and a failing side
record is logged and dropped, leaving the order in place. With
atomic=True the whole chain is one unit of work: rows are only flushed,
and any failure rolls every one of them back.
"""
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from catering.core.errors import IntakeError, OrderCreationError
from catering.core.logging import get_logger
from catering.models.schemas import OrderCreate
from catering.models.sql_models import Customer, Location, Order, CateringService, Payment

logger = get_logger(__name__)

GUEST_CUSTOMER_NAME = "Guest Customer"


@dataclass
class IntakeResult:
    order: Order
    customer_id: Optional[int] = None
    location_id: Optional[int] = None
    catering_service: Optional[CateringService] = None
    payment: Optional[Payment] = None


def find_customer_by_email(db: Session, email: Optional[str]) -> Optional[Customer]:
    """Exact, case-sensitive match. With duplicates the oldest row wins.

    A missing email never matches: email-less rows are not shared between callers.
    """
    if not email:
        return None
    return (
        db.query(Customer)
        .filter(Customer.email == email)
        .order_by(Customer.id)
        .first()
    )


def make_transaction_id(order_id: int, when: datetime) -> str:
    # Bookkeeping reference only, not guaranteed unique
    return f"TXN-{order_id}-{int(when.timestamp() * 1000)}"


class OrderIntake:
    def __init__(self, db: Session, atomic: bool = False):
        self.db = db
        self.atomic = atomic

    # --- persistence helpers ---

    def _save(self, obj):
        self.db.add(obj)
        if self.atomic:
            self.db.flush()
        else:
            self.db.commit()
            self.db.refresh(obj)
        return obj

    def _best_effort(self, step: str, obj):
        """Persist a side record; failures are logged and swallowed unless atomic"""
        try:
            return self._save(obj)
        except SQLAlchemyError as e:
            self.db.rollback()
            if self.atomic:
                raise IntakeError(f"Failed to create {step}", step=step) from e
            logger.exception("Error creating %s (order intake continues)", step)
            return None

    # --- steps ---

    def resolve_customer(self, email: Optional[str], name: Optional[str], phone: Optional[str]) -> Optional[int]:
        if not email:
            return None

        try:
            existing = find_customer_by_email(self.db, email)
        except SQLAlchemyError:
            self.db.rollback()
            if self.atomic:
                raise
            logger.exception("Error looking up customer %s", email)
            return None

        if existing:
            # Reused as-is, submitted name/phone are not written back
            return existing.id

        customer = self._best_effort(
            "customer",
            Customer(name=name or GUEST_CUSTOMER_NAME, email=email, phone=phone or ""),
        )
        return customer.id if customer else None

    def record_location(self, address: Optional[str], name: Optional[str], phone: Optional[str]) -> Optional[int]:
        if not address:
            return None
        # No dedupe: a repeated address gets a new row
        location = self._best_effort(
            "location",
            Location(name=name, address=address, phone=phone, status="active", country="Philippines"),
        )
        return location.id if location else None

    def create_order(self, payload: OrderCreate, customer_id: Optional[int], location_id: Optional[int]) -> Order:
        order = Order(
            customer_id=customer_id,
            customer_name=payload.customer_name,
            customer_email=payload.customer_email,
            order_type=payload.order_type,
            items=payload.items,
            meal_set_id=payload.meal_set_id,
            meal_set_name=payload.meal_set_name,
            quantity=payload.quantity,
            total_amount=payload.total_amount,
            status="pending",
            event_type=payload.event_type,
            event_date=payload.event_date,
            event_time=payload.event_time,
            order_date=payload.order_date or date.today(),
            delivery_date=payload.delivery_date or payload.event_date,
            delivery_time=payload.delivery_time,
            delivery_address=payload.delivery_address,
            location_id=location_id,
            contact_person=payload.contact_person,
            contact_number=payload.contact_number,
            payment_method=payload.payment_method,
            special_instructions=payload.special_instructions,
        )
        try:
            return self._save(order)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Error creating order")
            raise OrderCreationError("Failed to create order", step="order") from e

    def record_catering_service(
        self,
        payload: OrderCreate,
        order: Order,
        customer_id: Optional[int],
        location_id: Optional[int],
    ) -> Optional[CateringService]:
        if not (payload.event_type and payload.event_date):
            return None
        return self._best_effort(
            "catering service",
            CateringService(
                customer_id=customer_id,
                customer_name=payload.customer_name or GUEST_CUSTOMER_NAME,
                event_type=payload.event_type,
                event_date=payload.event_date,
                event_time=payload.event_time,
                guest_count=payload.quantity,
                status="pending",
                location=payload.delivery_address or "TBD",
                special_requests=payload.special_instructions,
                payment_method=payload.payment_method,
                order_id=order.id,
                location_id=location_id,
            ),
        )

    def record_payment(self, payload: OrderCreate, order: Order, customer_id: Optional[int]) -> Optional[Payment]:
        if not payload.payment_method or payload.total_amount <= 0:
            return None
        now = datetime.now(timezone.utc)
        return self._best_effort(
            "payment",
            Payment(
                order_id=order.id,
                customer_id=customer_id,
                customer_name=payload.customer_name,
                amount=payload.total_amount,
                payment_method=payload.payment_method,
                status="pending",
                transaction_id=make_transaction_id(order.id, now),
                payment_date=now,
            ),
        )

    # --- chain ---

    def run(self, payload: OrderCreate) -> IntakeResult:
        logger.info("Received order for %s (type=%s)", payload.customer_email, payload.order_type)
        try:
            customer_id = payload.customer_id
            if not customer_id:
                customer_id = self.resolve_customer(
                    payload.customer_email, payload.customer_name, payload.customer_phone
                )

            location_id = payload.location_id
            if not location_id:
                location_id = self.record_location(
                    payload.delivery_address,
                    payload.contact_person or payload.customer_name,
                    payload.contact_number or payload.customer_phone,
                )

            order = self.create_order(payload, customer_id, location_id)
            catering_service = self.record_catering_service(payload, order, customer_id, location_id)
            payment = self.record_payment(payload, order, customer_id)

            if self.atomic:
                self.db.commit()
                self.db.refresh(order)
        except IntakeError:
            self.db.rollback()
            raise
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Order intake rolled back")
            raise IntakeError("Failed to create order") from e

        logger.info("Order %s created (customer=%s, location=%s)", order.id, customer_id, location_id)
        return IntakeResult(
            order=order,
            customer_id=customer_id,
            location_id=location_id,
            catering_service=catering_service,
            payment=payment,
        )
