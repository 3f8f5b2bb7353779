# tests/test_patients.py
from app.helpers.time import today
from tests.helpers import future_date


async def test_create_then_get_returns_supplied_fields(client):
    payload = {
        "first_name": "Omar",
        "last_name": "Haddad",
        "date_of_birth": "1975-06-30",
        "gender": "M",
        "contact_number": "555-1234",
        "email": "omar@example.com",
        "address": "12 Elm Street",
        "blood_type": "AB-",
    }
    response = await client.post("/api/patients", json=payload)
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Patient added successfully"

    fetched = await client.get(f"/api/patients/{body['patient_id']}")
    assert fetched.status_code == 200
    assert fetched.json() == {
        **payload,
        "patient_id": body["patient_id"],
        "registration_date": today().isoformat(),
    }


async def test_ann_lee_lifecycle(client, patient_payload):
    created = await client.post("/api/patients", json=patient_payload)
    assert created.status_code == 201
    patient_id = created.json()["patient_id"]

    fetched = await client.get(f"/api/patients/{patient_id}")
    assert fetched.status_code == 200
    assert fetched.json()["last_name"] == "Lee"

    deleted = await client.delete(f"/api/patients/{patient_id}")
    assert deleted.status_code == 200
    assert deleted.json() == {"message": "Patient deleted successfully"}

    missing = await client.get(f"/api/patients/{patient_id}")
    assert missing.status_code == 404
    assert missing.json() == {"detail": "Patient not found"}


async def test_list_is_sorted_by_last_then_first_name(client):
    for first, last in [("Zoe", "Adams"), ("Bob", "Young"), ("Amy", "Adams"), ("Carl", "Miller")]:
        response = await client.post(
            "/api/patients",
            json={"first_name": first, "last_name": last, "date_of_birth": "1980-02-02", "gender": "Other"},
        )
        assert response.status_code == 201

    names = [(p["last_name"], p["first_name"]) for p in (await client.get("/api/patients")).json()]
    assert names == [("Adams", "Amy"), ("Adams", "Zoe"), ("Miller", "Carl"), ("Young", "Bob")]

    await client.post(
        "/api/patients",
        json={"first_name": "Dan", "last_name": "Brown", "date_of_birth": "1980-02-02", "gender": "M"},
    )
    names = [(p["last_name"], p["first_name"]) for p in (await client.get("/api/patients")).json()]
    assert names == sorted(names)
    assert ("Brown", "Dan") in names


async def test_duplicate_patients_are_allowed(client, patient_payload):
    first = await client.post("/api/patients", json=patient_payload)
    second = await client.post("/api/patients", json=patient_payload)
    assert first.status_code == second.status_code == 201
    assert first.json()["patient_id"] != second.json()["patient_id"]


async def test_create_rejects_missing_required_field(client):
    response = await client.post(
        "/api/patients", json={"first_name": "Ann", "date_of_birth": "1990-01-01", "gender": "F"}
    )
    assert response.status_code == 400
    body = response.json()
    assert body["detail"] == "Invalid request"
    assert any(error["field"] == "last_name" for error in body["errors"])


async def test_create_rejects_future_date_of_birth(client, patient_payload):
    response = await client.post("/api/patients", json={**patient_payload, "date_of_birth": future_date()})
    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "date_of_birth"


async def test_create_rejects_malformed_date_and_unknown_enum(client, patient_payload):
    bad_date = await client.post("/api/patients", json={**patient_payload, "date_of_birth": "01/02/1990"})
    assert bad_date.status_code == 400

    bad_gender = await client.post("/api/patients", json={**patient_payload, "gender": "X"})
    assert bad_gender.status_code == 400

    bad_blood = await client.post("/api/patients", json={**patient_payload, "blood_type": "C+"})
    assert bad_blood.status_code == 400


async def test_update_replaces_all_fields_and_keeps_registration_date(client, patient_payload):
    created = await client.post(
        "/api/patients", json={**patient_payload, "email": "ann@example.com", "blood_type": "O+"}
    )
    patient_id = created.json()["patient_id"]
    registration_date = (await client.get(f"/api/patients/{patient_id}")).json()["registration_date"]

    response = await client.put(
        f"/api/patients/{patient_id}",
        json={"first_name": "Ann", "last_name": "Lee-Park", "date_of_birth": "1990-01-01", "gender": "F"},
    )
    assert response.status_code == 200
    assert response.json() == {"message": "Patient updated successfully"}

    patient = (await client.get(f"/api/patients/{patient_id}")).json()
    assert patient["last_name"] == "Lee-Park"
    assert patient["email"] is None
    assert patient["blood_type"] is None
    assert patient["registration_date"] == registration_date


async def test_update_requires_every_required_field(client, patient_id):
    response = await client.put(f"/api/patients/{patient_id}", json={"last_name": "Only"})
    assert response.status_code == 400


async def test_update_missing_patient_is_404(client, patient_payload):
    response = await client.put("/api/patients/9999", json=patient_payload)
    assert response.status_code == 404


async def test_delete_missing_patient_is_404(client):
    response = await client.delete("/api/patients/9999")
    assert response.status_code == 404
