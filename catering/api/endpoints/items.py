# catering/api/endpoints/items.py
from typing import List
from fastapi import APIRouter, status

from catering.core.security import DbDependency
from catering.models.schemas import ItemCreate, ItemResponse, ItemUpdate
from catering.models.sql_models import Item
from catering.services.crud import CRUDService

router = APIRouter()
items = CRUDService(Item, "Item")


@router.get("", response_model=List[ItemResponse])
def list_items(db: DbDependency):
    return [ItemResponse.model_validate(i) for i in items.list(db)]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ItemResponse)
def create_item(payload: ItemCreate, db: DbDependency):
    return ItemResponse.model_validate(items.create(db, payload))


@router.get("/{item_id}", response_model=ItemResponse)
def get_item(item_id: int, db: DbDependency):
    return ItemResponse.model_validate(items.get(db, item_id))


@router.put("/{item_id}", response_model=ItemResponse)
def update_item(item_id: int, payload: ItemUpdate, db: DbDependency):
    return ItemResponse.model_validate(items.update(db, item_id, payload))


@router.delete("/{item_id}")
def delete_item(item_id: int, db: DbDependency):
    items.delete(db, item_id)
    return {"message": "Item deleted successfully"}
