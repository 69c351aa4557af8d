from datetime import date

import pytest

from catering.core.config import settings
from catering.core.errors import IntakeError, OrderCreationError
from catering.models.schemas import OrderCreate
from catering.models.sql_models import CateringService, Customer, Location, Order, Payment
from catering.services.order_intake import OrderIntake, make_transaction_id


def event_order(**overrides):
    payload = {
        "customer_email": "a@b.com",
        "customer_name": "A B",
        "items": [{"name": "Pancit", "price": 500, "quantity": 2}],
        "total_amount": 1000,
        "event_type": "birthday",
        "event_date": "2025-06-01",
        "delivery_address": "123 Main St",
        "contact_person": "A B",
        "contact_number": "09171234567",
        "payment_method": "gcash",
    }
    payload.update(overrides)
    return payload


def counts(db):
    return {
        "customers": db.query(Customer).count(),
        "locations": db.query(Location).count(),
        "orders": db.query(Order).count(),
        "catering_services": db.query(CateringService).count(),
        "payments": db.query(Payment).count(),
    }


# --- HTTP surface ---

def test_end_to_end_event_order(client, db_session):
    response = client.post("/api/orders", json=event_order())

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "pending"
    assert body["total_amount"] == 1000
    assert body["customer"]["email"] == "a@b.com"
    assert len(body["payments"]) == 1
    assert body["payments"][0]["status"] == "pending"

    assert counts(db_session) == {
        "customers": 1, "locations": 1, "orders": 1, "catering_services": 1, "payments": 1,
    }

    customer = db_session.query(Customer).one()
    location = db_session.query(Location).one()
    order = db_session.query(Order).one()
    service = db_session.query(CateringService).one()
    payment = db_session.query(Payment).one()

    assert order.customer_id == customer.id
    assert order.location_id == location.id
    assert location.address == "123 Main St"
    assert location.name == "A B"
    assert service.order_id == order.id
    assert service.location_id == location.id
    assert service.status == "pending"
    assert service.guest_count == 1
    assert service.location == "123 Main St"
    assert payment.order_id == order.id
    assert payment.amount == 1000
    assert payment.payment_method == "gcash"
    assert payment.transaction_id.startswith(f"TXN-{order.id}-")


def test_existing_customer_is_reused(client, db_session):
    existing = Customer(name="Original Name", email="a@b.com", phone="111")
    db_session.add(existing)
    db_session.commit()

    response = client.post(
        "/api/orders", json=event_order(customer_name="Other Name", customer_phone="999")
    )

    assert response.status_code == 201
    assert response.json()["customer_id"] == existing.id
    assert db_session.query(Customer).count() == 1
    db_session.refresh(existing)
    # Not updated from the submitted values
    assert existing.name == "Original Name"
    assert existing.phone == "111"


def test_new_customer_is_created_with_submitted_details(client, db_session):
    response = client.post(
        "/api/orders",
        json=event_order(customer_email="new@b.com", customer_name="New Person", customer_phone="0918"),
    )

    assert response.status_code == 201
    customer = db_session.query(Customer).one()
    assert customer.email == "new@b.com"
    assert customer.name == "New Person"
    assert customer.phone == "0918"
    assert response.json()["customer_id"] == customer.id


def test_customer_lookup_is_case_sensitive(client, db_session):
    db_session.add(Customer(name="A B", email="A@B.com", phone=""))
    db_session.commit()

    client.post("/api/orders", json=event_order(customer_email="a@b.com"))

    assert db_session.query(Customer).count() == 2


def test_order_survives_catering_service_failure(client, db_session, fail_inserts):
    fail_inserts(CateringService)

    response = client.post("/api/orders", json=event_order())

    assert response.status_code == 201
    order_id = response.json()["id"]
    assert db_session.get(Order, order_id) is not None
    assert db_session.query(CateringService).count() == 0
    # Later steps still run
    assert db_session.query(Payment).count() == 1


def test_order_survives_location_and_payment_failures(client, db_session, fail_inserts):
    fail_inserts(Location)
    fail_inserts(Payment)

    response = client.post("/api/orders", json=event_order())

    assert response.status_code == 201
    body = response.json()
    assert body["location_id"] is None
    assert body["payments"] == []
    assert counts(db_session) == {
        "customers": 1, "locations": 0, "orders": 1, "catering_services": 1, "payments": 0,
    }
    assert db_session.query(CateringService).one().location_id is None


def test_customer_creation_failure_leaves_order_orphaned(client, db_session, fail_inserts):
    fail_inserts(Customer)

    response = client.post("/api/orders", json=event_order())

    assert response.status_code == 201
    assert response.json()["customer_id"] is None
    assert response.json()["customer"] is None
    assert db_session.query(Order).count() == 1


def test_order_failure_is_fatal(client, db_session, fail_inserts):
    fail_inserts(Order)

    response = client.post("/api/orders", json=event_order())

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to create order"}
    assert db_session.query(CateringService).count() == 0
    assert db_session.query(Payment).count() == 0
    # Rows written before the order are not compensated
    assert db_session.query(Customer).count() == 1
    assert db_session.query(Location).count() == 1


@pytest.mark.parametrize("missing", ["event_type", "event_date"])
def test_no_catering_service_without_full_event_details(client, db_session, missing):
    response = client.post("/api/orders", json=event_order(**{missing: None}))

    assert response.status_code == 201
    assert db_session.query(CateringService).count() == 0


def test_no_payment_for_zero_total(client, db_session):
    response = client.post("/api/orders", json=event_order(total_amount=0))

    assert response.status_code == 201
    assert db_session.query(Payment).count() == 0


def test_no_payment_without_method(client, db_session):
    client.post("/api/orders", json=event_order(payment_method=None))

    assert db_session.query(Payment).count() == 0


def test_delivery_date_falls_back_to_event_date(client):
    response = client.post("/api/orders", json=event_order())

    body = response.json()
    assert body["delivery_date"] == "2025-06-01"
    assert body["order_date"] == date.today().isoformat()


def test_explicit_delivery_date_is_kept(client):
    response = client.post(
        "/api/orders", json=event_order(delivery_date="2025-05-31", order_date="2025-05-01")
    )

    body = response.json()
    assert body["delivery_date"] == "2025-05-31"
    assert body["order_date"] == "2025-05-01"


def test_repeated_address_creates_new_locations(client, db_session):
    client.post("/api/orders", json=event_order())
    client.post("/api/orders", json=event_order())

    locations = db_session.query(Location).all()
    assert len(locations) == 2
    assert locations[0].id != locations[1].id
    assert {loc.address for loc in locations} == {"123 Main St"}


def test_no_location_without_address(client, db_session):
    response = client.post("/api/orders", json=event_order(delivery_address=None))

    assert response.json()["location_id"] is None
    assert db_session.query(Location).count() == 0
    assert db_session.query(CateringService).one().location == "TBD"


def test_explicit_customer_id_skips_lookup(client, db_session):
    response = client.post("/api/orders", json=event_order(customer_id=42))

    assert response.json()["customer_id"] == 42
    assert db_session.query(Customer).count() == 0


def test_total_amount_is_not_recomputed(client):
    response = client.post(
        "/api/orders",
        json=event_order(items=[{"name": "Lumpia", "price": 10, "quantity": 1}], quantity=3, total_amount=7),
    )

    assert response.json()["total_amount"] == 7


def test_guest_count_follows_quantity(client, db_session):
    client.post("/api/orders", json=event_order(quantity=50))

    assert db_session.query(CateringService).one().guest_count == 50


def test_invalid_payload_is_a_bad_request(client, db_session):
    response = client.post("/api/orders", json=event_order(quantity=0))

    assert response.status_code == 400
    assert "quantity" in response.json()["error"]
    assert db_session.query(Order).count() == 0


def test_atomic_intake_rolls_back_everything(client, db_session, fail_inserts, monkeypatch):
    monkeypatch.setattr(settings, "ORDER_INTAKE_ATOMIC", True)
    fail_inserts(Payment)

    response = client.post("/api/orders", json=event_order())

    assert response.status_code == 500
    assert "error" in response.json()
    assert counts(db_session) == {
        "customers": 0, "locations": 0, "orders": 0, "catering_services": 0, "payments": 0,
    }


def test_atomic_intake_commits_on_success(client, db_session, monkeypatch):
    monkeypatch.setattr(settings, "ORDER_INTAKE_ATOMIC", True)

    response = client.post("/api/orders", json=event_order())

    assert response.status_code == 201
    assert counts(db_session) == {
        "customers": 1, "locations": 1, "orders": 1, "catering_services": 1, "payments": 1,
    }


# --- service level ---

def test_intake_result_reports_every_step(db_session):
    result = OrderIntake(db_session).run(OrderCreate(**event_order()))

    assert result.order.id is not None
    assert result.customer_id == result.order.customer_id
    assert result.location_id == result.order.location_id
    assert result.catering_service.order_id == result.order.id
    assert result.payment.order_id == result.order.id


def test_intake_raises_order_creation_error(db_session, fail_inserts):
    fail_inserts(Order)

    with pytest.raises(OrderCreationError):
        OrderIntake(db_session).run(OrderCreate(**event_order()))


def test_atomic_intake_raises_on_side_record_failure(db_session, fail_inserts):
    fail_inserts(CateringService)

    with pytest.raises(IntakeError) as excinfo:
        OrderIntake(db_session, atomic=True).run(OrderCreate(**event_order()))

    assert excinfo.value.step == "catering service"
    assert db_session.query(Order).count() == 0


def test_guest_name_used_when_missing(db_session):
    result = OrderIntake(db_session).run(OrderCreate(**event_order(customer_name=None)))

    assert db_session.get(Customer, result.customer_id).name == "Guest Customer"
    assert result.catering_service.customer_name == "Guest Customer"


def test_transaction_id_format():
    from datetime import datetime, timezone

    when = datetime(2025, 6, 1, tzinfo=timezone.utc)
    assert make_transaction_id(7, when) == f"TXN-7-{int(when.timestamp() * 1000)}"
