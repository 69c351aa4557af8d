import pytest

from catering.models.schemas import Identity
from catering.models.sql_models import Customer, MealSet, Order, Payment

REQUIRED = ["mealSetId", "quantity", "eventType", "eventDate", "deliveryAddress", "paymentMethod"]


@pytest.fixture
def meal_set(db_session):
    meal_set = MealSet(name="Fiesta Set", price=2500, items=["Pancit", "Lumpia"], is_available=True)
    db_session.add(meal_set)
    db_session.commit()
    return meal_set


def checkout(meal_set_id, **overrides):
    body = {
        "mealSetId": meal_set_id,
        "quantity": 2,
        "eventType": "birthday",
        "eventDate": "2025-06-01",
        "deliveryAddress": "123 Main St",
        "paymentMethod": "gcash",
        "contactNumber": "0917",
    }
    body.update(overrides)
    return body


def test_requires_bearer_token(client, meal_set):
    response = client.post("/api/meal-set-orders", json=checkout(meal_set.id))

    assert response.status_code == 401


def test_missing_fields_are_listed(client, auth_headers, meal_set):
    response = client.post(
        "/api/meal-set-orders", json=checkout(meal_set.id, eventType=None), headers=auth_headers
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields", "required": REQUIRED}


def test_unknown_meal_set(client, auth_headers, db_session):
    response = client.post("/api/meal-set-orders", json=checkout(404), headers=auth_headers)

    assert response.status_code == 404
    assert response.json() == {"error": "Meal set not found"}
    assert db_session.query(Order).count() == 0


def test_creates_customer_order_and_payment(client, auth_headers, db_session, meal_set):
    response = client.post("/api/meal-set-orders", json=checkout(meal_set.id), headers=auth_headers)

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Meal set order created successfully"
    assert body["meal_set"]["name"] == "Fiesta Set"

    order = body["order"]
    assert order["order_type"] == "meal_set"
    assert order["meal_set_name"] == "Fiesta Set"
    assert order["total_amount"] == 5000
    assert order["status"] == "pending"
    assert order["contact_person"] == "A B"
    assert order["delivery_date"] == "2025-06-01"

    assert body["payment"]["amount"] == 5000
    assert body["payment"]["status"] == "pending"
    assert body["payment"]["customer_name"] == "A B"

    customer = db_session.query(Customer).one()
    assert customer.email == "a@b.com"
    assert customer.name == "A B"
    assert customer.phone == "0917"
    assert customer.address == "123 Main St"


def test_reuses_existing_customer(client, auth_headers, db_session, meal_set):
    existing = Customer(name="Ana", email="a@b.com", phone="")
    db_session.add(existing)
    db_session.commit()

    body = client.post("/api/meal-set-orders", json=checkout(meal_set.id), headers=auth_headers).json()

    assert body["order"]["customer_id"] == existing.id
    assert body["order"]["contact_person"] == "Ana"
    assert db_session.query(Customer).count() == 1


def test_snake_case_fields_are_accepted(client, auth_headers, meal_set):
    response = client.post(
        "/api/meal-set-orders",
        json={
            "meal_set_id": meal_set.id,
            "quantity": 1,
            "event_type": "wake",
            "event_date": "2025-07-04",
            "delivery_address": "Naga",
            "payment_method": "cash",
        },
        headers=auth_headers,
    )

    assert response.status_code == 201
    assert response.json()["order"]["total_amount"] == 2500


def test_payment_failure_is_not_fatal(client, auth_headers, db_session, meal_set, fail_inserts):
    fail_inserts(Payment)

    response = client.post("/api/meal-set-orders", json=checkout(meal_set.id), headers=auth_headers)

    assert response.status_code == 201
    assert response.json()["payment"] is None
    assert db_session.query(Order).count() == 1


def test_customer_failure_is_fatal(client, auth_headers, db_session, meal_set, fail_inserts):
    fail_inserts(Customer)

    response = client.post("/api/meal-set-orders", json=checkout(meal_set.id), headers=auth_headers)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to create customer"}
    assert db_session.query(Order).count() == 0


def test_identities_without_email_get_separate_customers(client, identity_provider, db_session, meal_set):
    identity_provider.users["alice-token"] = Identity(id="u-alice", email=None, user_metadata={"name": "Alice"})
    identity_provider.users["bob-token"] = Identity(id="u-bob", email=None, user_metadata={"name": "Bob"})
    alice = {"Authorization": "Bearer alice-token"}
    bob = {"Authorization": "Bearer bob-token"}

    first = client.post("/api/meal-set-orders", json=checkout(meal_set.id), headers=alice).json()
    second = client.post("/api/meal-set-orders", json=checkout(meal_set.id), headers=bob).json()

    assert first["order"]["customer_id"] != second["order"]["customer_id"]
    assert second["order"]["contact_person"] == "Bob"
    assert db_session.query(Customer).count() == 2

    # No email means no customer record to scope the listing to
    listing = client.get("/api/my-orders", headers=bob).json()
    assert listing == {"orders": [], "is_admin": False, "message": "No customer record found"}
