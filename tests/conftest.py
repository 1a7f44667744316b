import pytest
from httpx import ASGITransport, AsyncClient

from pathlab.core.config import Settings
from pathlab.db.session import Database
from pathlab.main import create_application


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'lab.db'}",
        ENVIRONMENT="test",
        ENABLE_METRICS=False,
        DB_POOL_SIZE=5,
        DB_POOL_TIMEOUT=5,
    )


@pytest.fixture
async def database(anyio_backend, settings):
    db = Database(settings)
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
async def session(database):
    async with database.session() as s:
        yield s


@pytest.fixture
async def client(database, settings):
    app = create_application(settings, database=database)
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
async def catalog(client):
    """A category with one test carrying two components, plus a second bare test"""
    r = await client.post("/api/categories", json={"category_name": "Haematology"})
    assert r.status_code == 201, r.text
    category_id = r.json()["categoryId"]

    r = await client.post(
        "/api/tests",
        json={"test_name": "Complete Blood Count", "test_code": "CBC", "test_rate": 350, "category_id": category_id},
    )
    assert r.status_code == 201, r.text
    cbc_id = r.json()["testId"]

    r = await client.post(
        "/api/tests",
        json={"test_name": "ESR", "test_code": "ESR", "test_rate": 120, "category_id": category_id},
    )
    assert r.status_code == 201, r.text
    esr_id = r.json()["testId"]

    component_ids = []
    for name in ("Haemoglobin", "Platelet Count"):
        r = await client.post(
            "/api/components",
            json={"test_id": cbc_id, "component_name": name, "specimen": "Whole blood", "test_unit": "g/dL"},
        )
        assert r.status_code == 201, r.text
        component_ids.append(r.json()["componentId"])

    return {"category_id": category_id, "cbc_id": cbc_id, "esr_id": esr_id, "component_ids": component_ids}


@pytest.fixture
async def patient_id(client):
    r = await client.post(
        "/api/patients",
        json={"patients_name": "Jane Doe", "gender": "Female", "age_years": 34, "phone_number": "9876543210"},
    )
    assert r.status_code == 200, r.text
    return r.json()["patientId"]


@pytest.fixture
async def doctor_id(client):
    r = await client.post("/api/doctors", json={"doctor_name": "Dr. Rao", "clinic_name": "City Clinic"})
    assert r.status_code == 200, r.text
    return r.json()["doctorId"]
