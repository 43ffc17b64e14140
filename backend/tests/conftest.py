"""
Shared test fixtures for the payroll server tests.

Repository, service and API tests run against a fresh in-memory SQLite
database per test (aiosqlite + StaticPool so every session sees the same
connection).
"""
import os
from datetime import date, datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Set test environment before importing app modules
os.environ["ENVIRONMENT"] = "development"
os.environ["DEBUG"] = "true"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"

from app.db.base import Base, Department, Employee, JobGrade, SalaryRecord, AbsenceRecord  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, autoflush=False, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    """A session that did not take part in seeding, so nothing is pre-loaded in its identity map."""
    async with session_factory() as session:
        yield session


def make_employee(**overrides) -> Employee:
    values = {
        "employee_number": "EMP999",
        "first_name": "Test",
        "last_name": "Person",
        "email": "test.person@example.com",
        "status": "Active",
        "department_id": 1,
        "job_grade_id": 1,
        "created_at": datetime(2024, 1, 1, 9, 0, 0),
    }
    values.update(overrides)
    return Employee(**values)


@pytest_asyncio.fixture
async def org(session_factory):
    """Two departments and two job grades."""
    async with session_factory() as session:
        engineering = Department(id=1, name="Engineering", description="Builds things")
        finance = Department(id=2, name="Finance")
        junior = JobGrade(id=1, name="G1", min_salary=Decimal("30000"), max_salary=Decimal("60000"))
        senior = JobGrade(id=2, name="G2", min_salary=Decimal("60000"), max_salary=Decimal("120000"))
        session.add_all([engineering, finance, junior, senior])
        await session.commit()
    return {"engineering": 1, "finance": 2, "g1": 1, "g2": 2}


@pytest_asyncio.fixture
async def seeded(session_factory, org):
    """
    Employees (name order among live rows: Garcia, Lee Aaron, Lee Alice, Ng):

    number  name           dept  grade  created  status      deleted
    EMP001  Alice Lee      1     1      day 1    Active      no
    EMP002  Brian Ng       2     1      day 3    Active      no
    EMP003  Aaron Lee      1     2      day 2    OnLeave     no
    EMP004  Dana Smith     2     2      day 4    Active      yes
    EMP005  Eva Garcia     1     1      day 5    Inactive    no
    """
    async with session_factory() as session:
        alice = make_employee(
            employee_number="EMP001", first_name="Alice", last_name="Lee",
            email="alice.lee@example.com", department_id=1, job_grade_id=1,
            created_at=datetime(2024, 1, 1, 9, 0, 0),
        )
        # Inserted out of order; reads must come back latest-first
        alice.salary_records = [
            SalaryRecord(base_salary=Decimal("50000.00"), effective_date=date(2023, 1, 1)),
            SalaryRecord(base_salary=Decimal("55000.00"), effective_date=date(2024, 6, 1)),
            SalaryRecord(base_salary=Decimal("45000.00"), effective_date=date(2022, 1, 1)),
        ]
        alice.absence_records = [
            AbsenceRecord(year=2024, month=3, sick_leave_days=Decimal("2")),
            AbsenceRecord(year=2023, month=12, vacation_days=Decimal("5")),
            AbsenceRecord(year=2024, month=11, unpaid_leave_days=Decimal("1")),
        ]
        brian = make_employee(
            employee_number="EMP002", first_name="Brian", last_name="Ng",
            email="brian.ng@example.com", department_id=2, job_grade_id=1,
            created_at=datetime(2024, 1, 3, 9, 0, 0),
        )
        brian.salary_records = [
            SalaryRecord(base_salary=Decimal("48000.00"), effective_date=date(2024, 1, 1)),
        ]
        aaron = make_employee(
            employee_number="EMP003", first_name="Aaron", last_name="Lee",
            email="aaron.lee@corp.example.com", status="OnLeave", department_id=1, job_grade_id=2,
            created_at=datetime(2024, 1, 2, 9, 0, 0),
        )
        dana = make_employee(
            employee_number="EMP004", first_name="Dana", last_name="Smith",
            email="dana.smith@example.com", department_id=2, job_grade_id=2,
            created_at=datetime(2024, 1, 4, 9, 0, 0),
            is_deleted=True, deleted_at=datetime(2024, 2, 1, 9, 0, 0),
        )
        eva = make_employee(
            employee_number="EMP005", first_name="Eva", last_name="Garcia",
            email="eva.garcia@example.com", status="Inactive", department_id=1, job_grade_id=1,
            created_at=datetime(2024, 1, 5, 9, 0, 0),
        )
        session.add_all([alice, brian, aaron, dana, eva])
        await session.commit()
        ids = {
            "alice": alice.id,
            "brian": brian.id,
            "aaron": aaron.id,
            "dana": dana.id,
            "eva": eva.id,
        }
    return ids


@pytest_asyncio.fixture
async def client(session_factory):
    """HTTP client against the app with get_db bound to the test database."""
    from app.main import app
    from app.api.deps import get_db
    from app.core.rate_limiter import limiter

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    limiter.enabled = False
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
    limiter.enabled = True


@pytest.fixture
def mock_db_session():
    """Create a mock async database session."""
    session = AsyncMock(spec=AsyncSession)
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.refresh = AsyncMock()
    session.flush = AsyncMock()
    session.add = MagicMock()
    session.close = AsyncMock()
    return session


@pytest.fixture
def mock_request():
    """Create a mock FastAPI request object."""
    request = MagicMock()
    request.cookies = {}
    request.client = MagicMock()
    request.client.host = "127.0.0.1"
    request.headers = {}
    request.url = MagicMock()
    request.url.path = "/api/v1/test"
    request.method = "GET"
    return request
