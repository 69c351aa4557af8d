# catering/api/endpoints/meal_sets.py
from typing import List
from fastapi import APIRouter, status

from catering.core.security import DbDependency
from catering.models.schemas import MealSetCreate, MealSetResponse, MealSetUpdate
from catering.models.sql_models import MealSet
from catering.services.crud import CRUDService

router = APIRouter()
meal_sets = CRUDService(MealSet, "Meal set")


@router.get("", response_model=List[MealSetResponse])
def list_meal_sets(db: DbDependency):
    return [MealSetResponse.model_validate(m) for m in meal_sets.list(db)]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=MealSetResponse)
def create_meal_set(payload: MealSetCreate, db: DbDependency):
    return MealSetResponse.model_validate(meal_sets.create(db, payload))


@router.get("/{meal_set_id}", response_model=MealSetResponse)
def get_meal_set(meal_set_id: int, db: DbDependency):
    return MealSetResponse.model_validate(meal_sets.get(db, meal_set_id))


@router.put("/{meal_set_id}", response_model=MealSetResponse)
def update_meal_set(meal_set_id: int, payload: MealSetUpdate, db: DbDependency):
    return MealSetResponse.model_validate(meal_sets.update(db, meal_set_id, payload))


@router.delete("/{meal_set_id}")
def delete_meal_set(meal_set_id: int, db: DbDependency):
    meal_sets.delete(db, meal_set_id)
    return {"message": "Meal set deleted successfully"}
