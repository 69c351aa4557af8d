# catering/api/endpoints/catering_services.py
from typing import List
from fastapi import APIRouter, status

from catering.core.security import DbDependency
from catering.models.schemas import (
    CateringServiceCreate, CateringServiceDetailResponse, CateringServiceResponse, CateringServiceUpdate
)
from catering.models.sql_models import CateringService
from catering.services.crud import CRUDService

router = APIRouter()
services = CRUDService(CateringService, "Catering service")


@router.get("", response_model=List[CateringServiceResponse])
def list_catering_services(db: DbDependency):
    return [CateringServiceResponse.model_validate(s) for s in services.list(db)]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CateringServiceResponse)
def create_catering_service(payload: CateringServiceCreate, db: DbDependency):
    """Admin path, bypasses order intake"""
    return CateringServiceResponse.model_validate(services.create(db, payload))


@router.get("/{service_id}", response_model=CateringServiceDetailResponse)
def get_catering_service(service_id: int, db: DbDependency):
    return CateringServiceDetailResponse.model_validate(services.get(db, service_id))


@router.put("/{service_id}", response_model=CateringServiceResponse)
def update_catering_service(service_id: int, payload: CateringServiceUpdate, db: DbDependency):
    # The originating order is left untouched
    return CateringServiceResponse.model_validate(services.update(db, service_id, payload))


@router.delete("/{service_id}")
def delete_catering_service(service_id: int, db: DbDependency):
    services.delete(db, service_id)
    return {"message": "Catering service deleted successfully"}
