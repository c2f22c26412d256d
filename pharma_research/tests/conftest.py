"""pytest configuration and fixtures"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from pharma_research.core.database import Base, get_db
from pharma_research.main import app
from pharma_research.schemas.product import ProductCreate
from pharma_research.services.product_service import ProductService

# SQLite test database
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL, connect_args={"check_same_thread": False}
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db():
    """Database session for one test"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db):
    """FastAPI test client bound to the test session"""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def product_payload():
    """Factory for valid create/update bodies"""

    def make(**overrides):
        payload = {
            "name": "Paracetamol Plus",
            "category": "tablet",
            "active_ingredients": "Paracetamol 500mg",
            "batch_number": "BAT2024001",
            "research_status": "completed",
            "manufacturing_date": "2024-01-01",
            "expiration_date": "2026-01-01",
        }
        payload.update(overrides)
        return payload

    return make


@pytest.fixture
def service(db):
    return ProductService(db)


@pytest.fixture
def test_product(service, product_payload):
    """A stored product"""
    return service.create_product(
        ProductCreate.model_validate(
            product_payload(
                name="Antibio-X",
                category="capsule",
                active_ingredients="Amoxicillin 500mg",
                batch_number="BAT2024002",
                research_status="in clinical trials",
                manufacturing_date="2024-01-15",
                expiration_date="2025-01-15",
            )
        )
    )
