import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from main import app
from database import Base, get_db

# Setup in-memory SQLite database for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)

@pytest.fixture(scope="function")
def client(db_session):
    """Create a FastAPI TestClient with overridden database dependency."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    # Clean up is handled by yield
    app.dependency_overrides.pop(get_db, None)

@pytest.fixture
def dinner_payload():
    """A three-way equal split of 100.00."""
    return {
        "title": "Team Dinner",
        "total_amount": "100.00",
        "split_type": "EQUALLY",
        "bill_date": "2024-05-01",
        "participants": [
            {"name": "Alice"},
            {"name": "Bob"},
            {"name": "Carol"}
        ]
    }

@pytest.fixture
def dinner_bill(client, dinner_payload):
    """Create the three-way dinner bill and return its JSON representation."""
    response = client.post("/bills", json=dinner_payload)
    assert response.status_code == 201
    return response.json()
