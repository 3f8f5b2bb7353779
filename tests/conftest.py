# tests/conftest.py
import pytest
from httpx import ASGITransport, AsyncClient

from app.main import create_app
from app.system_services.doctor_services import list_doctors
from config.appconfig import AppSettings
from scripts.seed_doctors import seed_doctors


def make_settings(tmp_path, **overrides) -> AppSettings:
    return AppSettings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        DB_CREATE_TABLES=True,
        **overrides,
    )


@pytest.fixture
def settings(tmp_path):
    return make_settings(tmp_path)


@pytest.fixture
async def app(settings):
    application = create_app(settings)
    async with application.router.lifespan_context(application):
        yield application


@pytest.fixture
async def db(app):
    async with app.state.database.session() as session:
        yield session


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def doctor_ids(app):
    async with app.state.database.session() as session:
        await seed_doctors(session)
        return [doctor.doctor_id for doctor in await list_doctors(session)]


@pytest.fixture
def patient_payload():
    return {
        "first_name": "Ann",
        "last_name": "Lee",
        "date_of_birth": "1990-01-01",
        "gender": "F",
    }


@pytest.fixture
async def patient_id(client, patient_payload):
    response = await client.post("/api/patients", json=patient_payload)
    assert response.status_code == 201
    return response.json()["patient_id"]
