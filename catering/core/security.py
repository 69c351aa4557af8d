"""
Request-level auth dependencies.

Usage:
    @router.get("/my-orders")
    def my_orders(identity: CurrentIdentity, policy: AdminPolicyDependency, db: DbDependency):
        ...
"""
from typing import Annotated, Optional
from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from catering.core.database import get_db
from catering.core.logging import get_logger
from catering.models.schemas import Identity
from catering.services.identity import (
    AdminPolicy, IdentityProvider, get_admin_policy, get_identity_provider
)

logger = get_logger(__name__)


def get_bearer_token(authorization: Optional[str] = Header(None)) -> str:
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return authorization[len("Bearer "):].strip()


def get_current_identity(
    token: Annotated[str, Depends(get_bearer_token)],
    provider: Annotated[IdentityProvider, Depends(get_identity_provider)],
) -> Identity:
    identity = provider.get_user(token)
    if identity is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return identity


DbDependency = Annotated[Session, Depends(get_db)]
CurrentIdentity = Annotated[Identity, Depends(get_current_identity)]
AdminPolicyDependency = Annotated[AdminPolicy, Depends(get_admin_policy)]
