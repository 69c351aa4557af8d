"""
Generic CRUD service shared by the admin surfaces.

One instance per table; no cross-entity validation is done here, so deleting
a customer that orders still point at is allowed.
"""
from fastapi import HTTPException, status
from pydantic import BaseModel
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from catering.core.logging import get_logger

logger = get_logger(__name__)


class CRUDService:
    """List / get / create / update / delete for one model"""

    def __init__(self, model, label: str):
        self.model = model
        self.label = label  # "Customer", "Meal set", ...
        self.plural = f"{label.lower()}s"

    def _fail(self, db: Session, verb: str, error: Exception):
        db.rollback()
        logger.error("Error %s %s: %s", verb, self.label.lower(), error)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to {verb} {self.label.lower()}"
        )

    def list(self, db: Session) -> list:
        """All rows, newest first"""
        try:
            return (
                db.query(self.model)
                .order_by(self.model.created_at.desc(), self.model.id.desc())
                .all()
            )
        except SQLAlchemyError as e:
            db.rollback()
            logger.error("Error fetching %s: %s", self.plural, e)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to fetch {self.plural}"
            )

    def get(self, db: Session, obj_id: int):
        try:
            obj = db.query(self.model).filter(self.model.id == obj_id).first()
        except SQLAlchemyError as e:
            self._fail(db, "fetch", e)
        if not obj:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"{self.label} not found"
            )
        return obj

    def create(self, db: Session, data: BaseModel):
        obj = self.model(**data.model_dump())
        try:
            db.add(obj)
            db.commit()
            db.refresh(obj)
        except SQLAlchemyError as e:
            self._fail(db, "create", e)
        return obj

    def update(self, db: Session, obj_id: int, data: BaseModel):
        obj = self.get(db, obj_id)

        # Update only provided fields
        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(obj, field, value)

        try:
            db.commit()
            db.refresh(obj)
        except SQLAlchemyError as e:
            self._fail(db, "update", e)
        return obj

    def delete(self, db: Session, obj_id: int) -> None:
        obj = self.get(db, obj_id)
        try:
            db.delete(obj)
            db.commit()
        except SQLAlchemyError as e:
            self._fail(db, "delete", e)
