# catering/api/endpoints/meal_set_orders.py
from fastapi import APIRouter, HTTPException, status

from catering.core.config import settings
from catering.core.errors import IntakeError
from catering.core.security import CurrentIdentity, DbDependency
from catering.models.schemas import (
    MealSetOrderCreate, MealSetOrderResponse, MealSetResponse, OrderResponse, PaymentResponse
)
from catering.services.meal_set_orders import MealSetOrderIntake

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED, response_model=MealSetOrderResponse)
def create_meal_set_order(payload: MealSetOrderCreate, identity: CurrentIdentity, db: DbDependency):
    missing = payload.missing_fields()
    if missing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "Missing required fields", "required": list(MealSetOrderCreate.REQUIRED)},
        )

    try:
        result = MealSetOrderIntake(db, atomic=settings.ORDER_INTAKE_ATOMIC).run(payload, identity)
    except IntakeError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=e.message)

    return MealSetOrderResponse(
        order=OrderResponse.model_validate(result.order),
        payment=PaymentResponse.model_validate(result.payment) if result.payment else None,
        meal_set=MealSetResponse.model_validate(result.meal_set),
        message="Meal set order created successfully",
    )
