# catering/api/endpoints/locations.py
from typing import List
from fastapi import APIRouter, status

from catering.core.security import DbDependency
from catering.models.schemas import LocationCreate, LocationResponse, LocationUpdate
from catering.models.sql_models import Location
from catering.services.crud import CRUDService

router = APIRouter()
locations = CRUDService(Location, "Location")


@router.get("", response_model=List[LocationResponse])
def list_locations(db: DbDependency):
    return [LocationResponse.model_validate(loc) for loc in locations.list(db)]


@router.post("", status_code=status.HTTP_201_CREATED)
def create_location(payload: LocationCreate, db: DbDependency):
    location = locations.create(db, payload)
    return {"success": True, "location": LocationResponse.model_validate(location)}


@router.get("/{location_id}", response_model=LocationResponse)
def get_location(location_id: int, db: DbDependency):
    return LocationResponse.model_validate(locations.get(db, location_id))


@router.put("/{location_id}", response_model=LocationResponse)
def update_location(location_id: int, payload: LocationUpdate, db: DbDependency):
    return LocationResponse.model_validate(locations.update(db, location_id, payload))


@router.delete("/{location_id}")
def delete_location(location_id: int, db: DbDependency):
    locations.delete(db, location_id)
    return {"success": True}
