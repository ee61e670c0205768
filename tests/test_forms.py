from creditportal.models import Consultation, ContactSubmission

from tests.conftest import auth_headers


CONSULTATION = {
    "firstName": "Dana",
    "lastName": "Reyes",
    "email": "dana@example.com",
    "phone": "555-010-2000",
    "currentCreditScore": "580-619",
    "primaryGoal": "Buy a home",
    "negativeItems": ["late payments", "collections"],
}


def test_consultation_request_is_public(client):
    response = client.post("/api/consultations", json=CONSULTATION)

    assert response.status_code == 200
    body = response.json()
    assert body["id"] > 0
    assert body["status"] == "pending"
    assert body["negativeItems"] == ["late payments", "collections"]
    assert body["firstName"] == "Dana"


def test_consultation_requires_valid_email(client):
    response = client.post("/api/consultations", json={**CONSULTATION, "email": "nope"})

    assert response.status_code == 422


def test_consultations_listing_is_protected_and_newest_first(client):
    client.post("/api/consultations", json=CONSULTATION)
    client.post("/api/consultations", json={**CONSULTATION, "firstName": "Sam"})

    assert client.get("/api/consultations").status_code == 401

    listing = client.get("/api/consultations", headers=auth_headers("admin-1")).json()
    assert [c["firstName"] for c in listing] == ["Sam", "Dana"]


def test_consultation_status_update(client):
    created = client.post("/api/consultations", json=CONSULTATION).json()

    response = client.patch(
        f"/api/consultations/{created['id']}/status",
        json={"status": "scheduled"},
        headers=auth_headers("admin-1"),
    )

    assert response.status_code == 200
    assert response.json()["status"] == "scheduled"


def test_consultation_status_update_validates(client):
    created = client.post("/api/consultations", json=CONSULTATION).json()
    headers = auth_headers("admin-1")

    bad = client.patch(f"/api/consultations/{created['id']}/status", json={"status": "lost"}, headers=headers)
    missing = client.patch("/api/consultations/9999/status", json={"status": "contacted"}, headers=headers)

    assert bad.status_code == 422
    assert missing.status_code == 404


def test_contact_submission(client):
    response = client.post(
        "/api/contact",
        json={"name": "Lee", "email": "lee@example.com", "message": "Do you work with couples?"},
    )

    assert response.status_code == 200
    assert response.json()["status"] == "new"

    listing = client.get("/api/contact", headers=auth_headers("admin-1")).json()
    assert len(listing) == 1
    assert listing[0]["subject"] is None


def test_listings_return_rows_that_predate_form_validation(client, db_session):
    db_session.add(
        Consultation(first_name="Old", last_name="Import", email="not-an-email", phone="123", negative_items=None)
    )
    db_session.add(ContactSubmission(name="Legacy", email="legacy", message="hi", status="archived"))
    db_session.commit()
    headers = auth_headers("admin-1")

    consultations = client.get("/api/consultations", headers=headers)
    contacts = client.get("/api/contact", headers=headers)

    assert consultations.status_code == 200
    assert consultations.json()[0]["phone"] == "123"
    assert consultations.json()[0]["email"] == "not-an-email"
    assert contacts.status_code == 200
    assert contacts.json()[0]["status"] == "archived"
