# catering/api/endpoints/my_orders.py
from fastapi import APIRouter, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from catering.core.logging import get_logger
from catering.core.security import AdminPolicyDependency, CurrentIdentity, DbDependency
from catering.models.schemas import MyOrder, MyOrdersResponse
from catering.models.sql_models import Customer, Order
from catering.services.order_intake import find_customer_by_email

router = APIRouter()
logger = get_logger(__name__)


def to_my_order(order: Order, customer: Customer) -> MyOrder:
    return MyOrder(
        id=order.id,
        customer_id=order.customer_id,
        customer_name=customer.name if customer and customer.name else "Unknown Customer",
        total_amount=order.total_amount or 0,
        status=order.status or "pending",
        order_date=order.order_date or order.created_at,
        delivery_date=order.delivery_date,
        delivery_address=order.delivery_address,
        special_instructions=order.special_instructions,
        created_at=order.created_at,
        catering_service=None,
        location=None,
        payment=None,
    )


@router.get("", response_model=MyOrdersResponse, response_model_exclude_unset=True)
def list_my_orders(identity: CurrentIdentity, policy: AdminPolicyDependency, db: DbDependency):
    """Admins get every order; everyone else gets the orders of their own customer record"""
    is_admin = policy.is_admin(identity)
    logger.info("my-orders for %s (admin=%s)", identity.email, is_admin)

    try:
        # Inner join: orders without a resolvable customer are not listed
        query = db.query(Order, Customer).join(Customer, Order.customer_id == Customer.id)

        if not is_admin:
            customer = find_customer_by_email(db, identity.email)
            if not customer:
                logger.info("No customer record found for %s", identity.email)
                return MyOrdersResponse(orders=[], is_admin=False, message="No customer record found")
            query = query.filter(Order.customer_id == customer.id)

        rows = query.order_by(Order.created_at.desc(), Order.id.desc()).all()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Orders query error: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch orders"
        )

    my_orders = [to_my_order(order, customer) for order, customer in rows]
    return MyOrdersResponse(orders=my_orders, is_admin=is_admin, total=len(my_orders))
