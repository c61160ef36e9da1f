"""Pytest fixtures for storefront tests."""

import tempfile
from decimal import Decimal
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from storefront.db.database import create_tables, get_db, make_engine
from storefront.main import app
from storefront.models import Category, Product, ProductImage, Profile


@pytest.fixture
def engine():
    """File-backed SQLite database per test (threads share it)."""
    with tempfile.TemporaryDirectory() as tmpdir:
        db_engine = make_engine(f"sqlite:///{Path(tmpdir) / 'storefront.db'}")
        create_tables(bind=db_engine)
        yield db_engine
        db_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    """Test client whose requests use the per-test database."""

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def make_profile(db, email, is_admin=False):
    profile = Profile(id=f"user-{email.split('@')[0]}", email=email, is_admin=is_admin)
    db.add(profile)
    db.commit()
    return profile


@pytest.fixture
def user(db):
    return make_profile(db, "alice@example.com")


@pytest.fixture
def other_user(db):
    return make_profile(db, "bob@example.com")


@pytest.fixture
def admin(db):
    return make_profile(db, "admin@example.com", is_admin=True)


@pytest.fixture
def headers(user):
    return {"X-User-Id": user.id}


@pytest.fixture
def other_headers(other_user):
    return {"X-User-Id": other_user.id}


@pytest.fixture
def catalog(db):
    """Two categories with a handful of products, one inactive."""
    electronics = Category(name="Electronics", slug="electronics", sort_order=0)
    books = Category(name="Books", slug="books", sort_order=1)
    db.add_all([electronics, books])
    db.flush()

    rows = [
        ("Wireless Headphones", "Noise cancelling headphones", "WBH-001", "199.99", electronics, True, True),
        ("Phone Charger", "Fast wireless charging pad", "WPC-010", "34.99", electronics, False, True),
        ("Mystery Novels", "Complete mystery novel collection", "MNC-008", "49.99", books, False, True),
        ("Retired Gadget", "No longer sold", "RTG-999", "9.99", electronics, True, False),
    ]
    products = {}
    for name, description, sku, price, category, featured, active in rows:
        product = Product(
            name=name,
            description=description,
            short_description=description,
            sku=sku,
            price=Decimal(price),
            category_id=category.id,
            inventory_quantity=10,
            is_featured=featured,
            is_active=active,
        )
        product.images.append(ProductImage(image_url=f"https://img.example.com/{sku}.jpg", is_primary=True))
        db.add(product)
        products[sku] = product
    db.commit()

    return {"categories": {"electronics": electronics, "books": books}, "products": products}


@pytest.fixture
def address_payload():
    def build(**overrides):
        payload = {
            "type": "home",
            "name": "Alice Kim",
            "address_line_1": "1 Main St",
            "city": "Springfield",
            "state": "IL",
            "postal_code": "62701",
            "country": "United States",
        }
        payload.update(overrides)
        return payload
    return build
