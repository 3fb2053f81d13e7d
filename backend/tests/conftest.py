import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text
from sqlalchemy.orm import sessionmaker

from jobly.database import get_db, get_engine, init_db
from jobly.main import app

COMPANIES = [
    ("c1", "C1", "Desc1", 1, "http://c1.img"),
    ("c2", "C2", "Desc2", 2, "http://c2.img"),
    ("c3", "C3", "Desc3", 3, "http://c3.img"),
]

JOBS = [
    ("Job1", 100, "0.1", "c1"),
    ("Job2", 200, "0.2", "c1"),
    ("Job3", 300, "0", "c2"),
    ("Job4", None, None, "c2"),
]


def _seed(session):
    for handle, name, description, num_employees, logo_url in COMPANIES:
        session.execute(
            text("""
                INSERT INTO companies (handle, name, description, num_employees, logo_url)
                VALUES (:handle, :name, :description, :num_employees, :logo_url)
            """),
            {
                "handle": handle,
                "name": name,
                "description": description,
                "num_employees": num_employees,
                "logo_url": logo_url,
            },
        )
    for title, salary, equity, company_handle in JOBS:
        session.execute(
            text("""
                INSERT INTO jobs (title, salary, equity, company_handle)
                VALUES (:title, :salary, :equity, :company_handle)
            """),
            {"title": title, "salary": salary, "equity": equity, "company_handle": company_handle},
        )
    session.commit()


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "jobly_test.db"


@pytest.fixture
def test_db(db_path):
    engine = get_engine(f"sqlite:///{db_path}")
    init_db(engine)
    TestSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)

    session = TestSession()
    _seed(session)
    session.close()

    def override_get_db():
        db = TestSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestSession
    app.dependency_overrides.clear()
    engine.dispose()


@pytest.fixture
def db(test_db):
    session = test_db()
    yield session
    session.close()


@pytest.fixture
def job_ids(db):
    """Seeded job ids keyed by title."""
    rows = db.execute(text("SELECT title, id FROM jobs")).all()
    return {title: job_id for title, job_id in rows}


@pytest.fixture
def client(test_db):
    return TestClient(app)
