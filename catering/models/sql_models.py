# catering/models/sql_models.py
from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, Float, Boolean, Date, DateTime, Text, JSON
from sqlalchemy.orm import relationship
from catering.core.database import Base


def utcnow():
    return datetime.now(timezone.utc)


# Reference columns (customer_id, order_id, location_id) are plain integers:
# no foreign-key constraint, a deleted customer leaves a dangling id behind.

class Customer(Base):
    __tablename__ = "customers"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, default="")
    email = Column(String(255), index=True)  # looked up, not unique
    phone = Column(String(50), default="")
    address = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)


class Item(Base):
    __tablename__ = "items"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Float, nullable=False, default=0.0)  # PHP
    category = Column(String(50), nullable=True)  # snack / main / side / beverage
    is_available = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)


class MealSet(Base):
    __tablename__ = "meal_sets"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    type = Column(String(20), nullable=True)  # basic / standard / premium
    description = Column(Text, nullable=True)
    price = Column(Float, nullable=False, default=0.0)
    items = Column(JSON, default=list)  # ordered item names/ids, denormalized
    is_available = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)


class Location(Base):
    __tablename__ = "locations"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=True)
    address = Column(Text, nullable=True)
    phone = Column(String(50), nullable=True)
    status = Column(String(20), default="active")
    state = Column(String(100), nullable=True)
    zip_code = Column(String(20), nullable=True)
    country = Column(String(100), default="Philippines")
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)


class Order(Base):
    __tablename__ = "orders"
    id = Column(Integer, primary_key=True, index=True)
    customer_id = Column(Integer, nullable=True, index=True)
    customer_name = Column(String(255), nullable=True)
    customer_email = Column(String(255), nullable=True)

    order_type = Column(String(20), default="custom")  # meal_set | custom
    items = Column(JSON, nullable=True)
    meal_set_id = Column(Integer, nullable=True)
    meal_set_name = Column(String(255), nullable=True)
    quantity = Column(Integer, default=1)
    total_amount = Column(Float, nullable=False, default=0.0)

    # pending -> confirmed -> preparing -> delivered, or cancelled; not enforced
    status = Column(String(20), nullable=False, default="pending", index=True)

    event_type = Column(String(100), nullable=True)
    event_date = Column(Date, nullable=True)
    event_time = Column(String(20), nullable=True)
    order_date = Column(Date, nullable=True)
    delivery_date = Column(Date, nullable=True)
    delivery_time = Column(String(20), nullable=True)
    delivery_address = Column(Text, nullable=True)
    location_id = Column(Integer, nullable=True)

    contact_person = Column(String(255), nullable=True)
    contact_number = Column(String(50), nullable=True)
    payment_method = Column(String(50), nullable=True)
    special_instructions = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    # Read-path joins only
    customer = relationship(
        "Customer",
        primaryjoin="foreign(Order.customer_id) == Customer.id",
        viewonly=True,
    )
    payments = relationship(
        "Payment",
        primaryjoin="Order.id == foreign(Payment.order_id)",
        viewonly=True,
        order_by="Payment.id",
    )


class CateringService(Base):
    __tablename__ = "catering_services"
    id = Column(Integer, primary_key=True, index=True)
    customer_id = Column(Integer, nullable=True)
    customer_name = Column(String(255), nullable=True)
    event_type = Column(String(100), nullable=True)
    event_date = Column(Date, nullable=True)
    event_time = Column(String(20), nullable=True)
    guest_count = Column(Integer, default=1)
    status = Column(String(20), default="pending")
    location = Column(Text, nullable=True)  # denormalized address text
    special_requests = Column(Text, nullable=True)
    payment_method = Column(String(50), nullable=True)
    order_id = Column(Integer, nullable=True, index=True)
    location_id = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    customer = relationship(
        "Customer",
        primaryjoin="foreign(CateringService.customer_id) == Customer.id",
        viewonly=True,
    )


class Payment(Base):
    __tablename__ = "payments"
    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, nullable=True, index=True)
    customer_id = Column(Integer, nullable=True)
    customer_name = Column(String(255), nullable=True)
    amount = Column(Float, nullable=False, default=0.0)
    payment_method = Column(String(50), nullable=True)
    status = Column(String(20), default="pending")  # pending / paid / ...
    transaction_id = Column(String(100), nullable=True)
    payment_date = Column(DateTime(timezone=True), nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    customer = relationship(
        "Customer",
        primaryjoin="foreign(Payment.customer_id) == Customer.id",
        viewonly=True,
    )
