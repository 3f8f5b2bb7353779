# tests/test_errors.py
from sqlalchemy.exc import OperationalError

from app.database.connection import MAX_INTEGER_ID, Database

from app.shared.exceptions import DependentRecordsError, InvalidReferenceError, NotFoundError
from app.system_services import patient_services


async def test_storage_failure_is_opaque_500(client, monkeypatch):
    async def broken(db):
        raise OperationalError("SELECT * FROM patients", {}, Exception("connection refused"))

    monkeypatch.setattr(patient_services, "list_patients", broken)

    response = await client.get("/api/patients")
    assert response.status_code == 500
    assert response.json() == {"detail": "Server error"}


async def test_health_reports_database(client):
    response = await client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True, "db": True}


async def test_malformed_json_is_400(client):
    response = await client.post(
        "/api/patients", content=b"{not json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400


async def test_non_integer_id_is_400(client):
    assert (await client.get("/api/patients/abc")).status_code == 400


async def test_out_of_range_patient_id_is_400(client, patient_payload):
    too_big = "99999999999999999999999"
    for response in (
        await client.get(f"/api/patients/{too_big}"),
        await client.put(f"/api/patients/{too_big}", json=patient_payload),
        await client.delete(f"/api/patients/{too_big}"),
        await client.get(f"/api/patients/{MAX_INTEGER_ID + 1}"),
        await client.get("/api/patients/0"),
    ):
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid request"


async def test_largest_patient_id_is_a_plain_404(client):
    assert (await client.get(f"/api/patients/{MAX_INTEGER_ID}")).status_code == 404


async def test_out_of_range_reference_ids_are_400(client):
    appointment = await client.post(
        "/api/appointments",
        json={
            "patient_id": 10**20,
            "doctor_id": 1,
            "appointment_date": "2999-01-01",
            "appointment_time": "09:00",
        },
    )
    assert appointment.status_code == 400
    assert appointment.json()["errors"][0]["field"] == "patient_id"

    record = await client.post(
        "/api/medical-records",
        json={
            "patient_id": 1,
            "doctor_id": 10**20,
            "visit_date": "2000-01-01",
            "diagnosis": "Flu",
            "treatment": "Rest",
        },
    )
    assert record.status_code == 400
    assert record.json()["errors"][0]["field"] == "doctor_id"


async def test_health_reports_unreachable_database(client, app, monkeypatch):
    async def unreachable():
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    monkeypatch.setattr(app.state.database, "ping", unreachable)

    response = await client.get("/api/health")
    assert response.status_code == 500
    assert response.json() == {"ok": False, "db": False}


def test_driver_timeout_arguments():
    sqlite = Database("sqlite+aiosqlite:///:memory:", command_timeout=5)
    assert sqlite._connect_args() == {"timeout": 5}

    postgres = Database("postgresql+asyncpg://u:p@localhost/db", command_timeout=5)
    assert postgres._connect_args() == {"command_timeout": 5}


def test_exception_payloads():
    assert NotFoundError("Patient", 3).to_dict() == {"detail": "Patient not found"}

    conflict = DependentRecordsError(patient_id=1, appointment_count=2, record_count=0)
    assert conflict.status_code == 400
    assert conflict.to_dict()["appointment_count"] == 2

    reference = InvalidReferenceError("doctor_id", 7)
    assert reference.status_code == 400
    assert reference.to_dict() == {
        "detail": "doctor_id 7 does not reference an existing doctor",
        "field": "doctor_id",
    }
