"""Shared test fixtures."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient
from datetime import datetime

from finance_tracker.database import Base, enable_sqlite_foreign_keys
from finance_tracker.dependencies import get_db
from finance_tracker.main import app
from finance_tracker.models import Category, Product, ProductPrice, User
from finance_tracker.services.auth_service import hash_password


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test using in-memory SQLite."""
    # Use StaticPool to ensure all connections use the same in-memory database
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)

    # Create all tables
    Base.metadata.create_all(bind=engine)

    # Create session
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def sign_up_and_login(client, email, password="secret123"):
    """Register a user through the API and return bearer headers."""
    response = client.post("/api/users", json={"email": email, "password_hash": password})
    assert response.status_code == 200, response.text
    response = client.post("/api/login", json={"email": email, "password_hash": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def auth_headers(client):
    """Bearer headers for alice@example.com."""
    return sign_up_and_login(client, "alice@example.com")


@pytest.fixture
def other_auth_headers(client):
    """Bearer headers for a second, unrelated user."""
    return sign_up_and_login(client, "bob@example.com")


@pytest.fixture
def sample_user(db_session):
    """Create a user directly in the database."""
    user = User(email="carol@example.com", password_hash=hash_password("pw"))
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def sample_category(db_session, sample_user):
    """Create a sample category."""
    category = Category(user_id=sample_user.id, name="Groceries")
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


@pytest.fixture
def sample_product(db_session, sample_user, sample_category):
    """Create a sample categorized product with one price."""
    product = Product(user_id=sample_user.id, name="Milk", category_id=sample_category.id)
    db_session.add(product)
    db_session.flush()
    db_session.add(ProductPrice(product_id=product.id, price=299, created_at=datetime(2025, 1, 8)))
    db_session.commit()
    db_session.refresh(product)
    return product
