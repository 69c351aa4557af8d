# catering/models/schemas.py
from datetime import date, datetime
from enum import Enum
from typing import Any, ClassVar, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class ItemCategory(str, Enum):
    SNACK = "snack"
    MAIN = "main"
    SIDE = "side"
    BEVERAGE = "beverage"


class OrderStatus(str, Enum):
    """Usual lifecycle; updates may still write any string"""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PREPARING = "preparing"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class OrmModel(BaseModel):
    # Pydantic V2 Config to read SQLAlchemy models
    model_config = ConfigDict(from_attributes=True)


# --- Customers ---

class CustomerCreate(BaseModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    phone: Optional[str] = ""
    address: Optional[str] = None


class CustomerUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None


class CustomerResponse(OrmModel):
    id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    created_at: datetime


class CustomerLookup(BaseModel):
    email: Optional[str] = None


class CustomerSummary(OrmModel):
    id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None


class CustomerContact(OrmModel):
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None


# --- Catalog ---

class ItemCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    price: float = Field(..., ge=0)
    category: Optional[ItemCategory] = None
    is_available: bool = True


class ItemUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    category: Optional[ItemCategory] = None
    is_available: Optional[bool] = None


class ItemResponse(OrmModel):
    id: int
    name: str
    description: Optional[str] = None
    price: float
    category: Optional[str] = None
    is_available: bool
    created_at: datetime


class MealSetCreate(BaseModel):
    name: str = Field(..., min_length=1)
    type: Optional[str] = None
    description: Optional[str] = None
    price: float = Field(..., ge=0)
    items: List[Any] = []
    is_available: bool = True


class MealSetUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    type: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    items: Optional[List[Any]] = None
    is_available: Optional[bool] = None


class MealSetResponse(OrmModel):
    id: int
    name: str
    type: Optional[str] = None
    description: Optional[str] = None
    price: float
    items: Optional[List[Any]] = None
    is_available: bool
    created_at: datetime


# --- Locations ---

class LocationCreate(BaseModel):
    name: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    status: str = "active"
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: str = "Philippines"


class LocationUpdate(BaseModel):
    name: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    status: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None


class LocationResponse(OrmModel):
    id: int
    name: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    status: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None
    created_at: datetime


# --- Payments ---

class PaymentCreate(BaseModel):
    order_id: Optional[int] = None
    customer_id: Optional[int] = None
    customer_name: Optional[str] = None
    amount: float = Field(..., ge=0)
    payment_method: Optional[str] = None
    status: str = "pending"
    transaction_id: Optional[str] = None
    payment_date: Optional[datetime] = None
    notes: Optional[str] = None


class PaymentUpdate(BaseModel):
    order_id: Optional[int] = None
    customer_id: Optional[int] = None
    customer_name: Optional[str] = None
    amount: Optional[float] = Field(None, ge=0)
    payment_method: Optional[str] = None
    status: Optional[str] = None
    transaction_id: Optional[str] = None
    payment_date: Optional[datetime] = None
    notes: Optional[str] = None


class PaymentResponse(OrmModel):
    id: int
    order_id: Optional[int] = None
    customer_id: Optional[int] = None
    customer_name: Optional[str] = None
    amount: float
    payment_method: Optional[str] = None
    status: Optional[str] = None
    transaction_id: Optional[str] = None
    payment_date: Optional[datetime] = None
    notes: Optional[str] = None
    created_at: datetime


class PaymentDetailResponse(PaymentResponse):
    customer: Optional[CustomerContact] = None


class PaymentSummary(OrmModel):
    id: int
    amount: float
    payment_method: Optional[str] = None
    status: Optional[str] = None


# --- Catering services ---

class CateringServiceCreate(BaseModel):
    customer_id: Optional[int] = None
    customer_name: Optional[str] = None
    event_type: Optional[str] = None
    event_date: Optional[date] = None
    event_time: Optional[str] = None
    guest_count: int = Field(1, ge=0)
    status: str = "pending"
    location: Optional[str] = None
    special_requests: Optional[str] = None
    payment_method: Optional[str] = None
    order_id: Optional[int] = None
    location_id: Optional[int] = None


class CateringServiceUpdate(BaseModel):
    customer_id: Optional[int] = None
    customer_name: Optional[str] = None
    event_type: Optional[str] = None
    event_date: Optional[date] = None
    event_time: Optional[str] = None
    guest_count: Optional[int] = Field(None, ge=0)
    status: Optional[str] = None
    location: Optional[str] = None
    special_requests: Optional[str] = None
    payment_method: Optional[str] = None
    order_id: Optional[int] = None
    location_id: Optional[int] = None


class CateringServiceResponse(OrmModel):
    id: int
    customer_id: Optional[int] = None
    customer_name: Optional[str] = None
    event_type: Optional[str] = None
    event_date: Optional[date] = None
    event_time: Optional[str] = None
    guest_count: Optional[int] = None
    status: Optional[str] = None
    location: Optional[str] = None
    special_requests: Optional[str] = None
    payment_method: Optional[str] = None
    order_id: Optional[int] = None
    location_id: Optional[int] = None
    created_at: datetime


class CateringServiceDetailResponse(CateringServiceResponse):
    customer: Optional[CustomerContact] = None


# --- Orders ---

class OrderCreate(BaseModel):
    """Checkout payload; total_amount is trusted as computed by the caller"""
    customer_id: Optional[int] = None
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    customer_phone: Optional[str] = None

    order_type: str = "custom"
    items: Optional[List[Any]] = None
    meal_set_id: Optional[int] = None
    meal_set_name: Optional[str] = None
    quantity: int = Field(1, ge=1)
    total_amount: float = Field(0, ge=0)

    event_type: Optional[str] = None
    event_date: Optional[date] = None
    event_time: Optional[str] = None
    order_date: Optional[date] = None
    delivery_date: Optional[date] = None
    delivery_time: Optional[str] = None
    delivery_address: Optional[str] = None
    location_id: Optional[int] = None

    contact_person: Optional[str] = None
    contact_number: Optional[str] = None
    payment_method: Optional[str] = None
    special_instructions: Optional[str] = None


class OrderUpdate(BaseModel):
    customer_id: Optional[int] = None
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    order_type: Optional[str] = None
    items: Optional[List[Any]] = None
    meal_set_id: Optional[int] = None
    meal_set_name: Optional[str] = None
    quantity: Optional[int] = Field(None, ge=1)
    total_amount: Optional[float] = Field(None, ge=0)
    status: Optional[str] = None
    event_type: Optional[str] = None
    event_date: Optional[date] = None
    event_time: Optional[str] = None
    order_date: Optional[date] = None
    delivery_date: Optional[date] = None
    delivery_time: Optional[str] = None
    delivery_address: Optional[str] = None
    location_id: Optional[int] = None
    contact_person: Optional[str] = None
    contact_number: Optional[str] = None
    payment_method: Optional[str] = None
    special_instructions: Optional[str] = None


class OrderResponse(OrmModel):
    id: int
    customer_id: Optional[int] = None
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    order_type: Optional[str] = None
    items: Optional[List[Any]] = None
    meal_set_id: Optional[int] = None
    meal_set_name: Optional[str] = None
    quantity: Optional[int] = None
    total_amount: float
    status: str
    event_type: Optional[str] = None
    event_date: Optional[date] = None
    event_time: Optional[str] = None
    order_date: Optional[date] = None
    delivery_date: Optional[date] = None
    delivery_time: Optional[str] = None
    delivery_address: Optional[str] = None
    location_id: Optional[int] = None
    contact_person: Optional[str] = None
    contact_number: Optional[str] = None
    payment_method: Optional[str] = None
    special_instructions: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None


class OrderDetailResponse(OrderResponse):
    customer: Optional[CustomerSummary] = None
    payments: List[PaymentSummary] = []


class MyOrder(BaseModel):
    id: int
    customer_id: Optional[int] = None
    customer_name: str
    total_amount: float
    status: str
    order_date: Optional[date | datetime] = None
    delivery_date: Optional[date] = None
    delivery_address: Optional[str] = None
    special_instructions: Optional[str] = None
    created_at: datetime
    catering_service: Optional[dict] = None
    location: Optional[dict] = None
    payment: Optional[dict] = None


class MyOrdersResponse(BaseModel):
    orders: List[MyOrder]
    is_admin: bool
    total: Optional[int] = None
    message: Optional[str] = None


class MealSetOrderCreate(BaseModel):
    """Meal-set checkout; camelCase keys from the storefront, snake_case accepted too"""
    model_config = ConfigDict(populate_by_name=True)

    meal_set_id: Optional[int] = Field(None, alias="mealSetId")
    quantity: Optional[int] = Field(None, ge=1)
    event_type: Optional[str] = Field(None, alias="eventType")
    event_date: Optional[date] = Field(None, alias="eventDate")
    delivery_address: Optional[str] = Field(None, alias="deliveryAddress")
    payment_method: Optional[str] = Field(None, alias="paymentMethod")
    contact_person: Optional[str] = Field(None, alias="contactPerson")
    contact_number: Optional[str] = Field(None, alias="contactNumber")
    special_requests: Optional[str] = Field(None, alias="specialRequests")

    REQUIRED: ClassVar[tuple[str, ...]] = ("mealSetId", "quantity", "eventType", "eventDate", "deliveryAddress", "paymentMethod")

    def missing_fields(self) -> list[str]:
        values = {
            "mealSetId": self.meal_set_id,
            "quantity": self.quantity,
            "eventType": self.event_type,
            "eventDate": self.event_date,
            "deliveryAddress": self.delivery_address,
            "paymentMethod": self.payment_method,
        }
        return [name for name in self.REQUIRED if not values[name]]


class MealSetOrderResponse(BaseModel):
    order: OrderResponse
    payment: Optional[PaymentResponse] = None
    meal_set: MealSetResponse
    message: str


# --- Auth ---

class Identity(BaseModel):
    """Authenticated user as reported by the identity provider"""
    id: str
    email: Optional[str] = None
    user_metadata: dict = {}
