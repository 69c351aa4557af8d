import os

# Must be set before the app modules read their settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ADMIN_EMAILS"] = "admin@example.com"
os.environ["ORDER_INTAKE_ATOMIC"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from catering.core.database import Base, get_db
from catering.models.schemas import Identity
from catering.services.identity import AdminPolicy, get_admin_policy, get_identity_provider

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

USER_TOKEN = "user-token"
ADMIN_TOKEN = "admin-token"


class FakeIdentityProvider:
    """Stands in for the hosted auth service"""

    def __init__(self):
        self.users = {
            USER_TOKEN: Identity(id="user-1", email="a@b.com", user_metadata={"full_name": "A B"}),
            ADMIN_TOKEN: Identity(id="admin-1", email="admin@example.com"),
        }

    def get_user(self, token):
        return self.users.get(token)


@pytest.fixture
def db_session():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def identity_provider():
    return FakeIdentityProvider()


@pytest.fixture
def client(db_session, identity_provider):
    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_identity_provider] = lambda: identity_provider
    app.dependency_overrides[get_admin_policy] = lambda: AdminPolicy(["admin@example.com"])
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {USER_TOKEN}"}


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}


@pytest.fixture
def fail_inserts():
    """Make every INSERT into the given model fail, like a database outage would"""
    registered = []

    def _fail(model):
        def boom(mapper, connection, target):
            raise OperationalError("INSERT", {}, Exception(f"forced failure on {model.__tablename__}"))

        event.listen(model, "before_insert", boom)
        registered.append((model, boom))

    yield _fail

    for model, fn in registered:
        event.remove(model, "before_insert", fn)
