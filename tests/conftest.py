import os

# Must be set before storefront.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ.pop("GEMINI_API_KEY", None)
os.environ.pop("CLOUDINARY_API_SECRET", None)

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.api.deps import get_text_generation_client
from storefront.database import Base, get_db
from storefront.main import app
from storefront.models import Order, OrderItem, OrderStatus, Product, Store, User
from storefront.services.auth_service import create_access_token, hash_password
from tests.helpers import FakeTextClient


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()
    
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_text_generation_client] = lambda: FakeTextClient(configured=False)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def store(db):
    store = Store(name="Acme", slug="acme")
    db.add(store)
    db.commit()
    db.refresh(store)
    return store


@pytest.fixture
def other_store(db):
    store = Store(name="Other", slug="other")
    db.add(store)
    db.commit()
    db.refresh(store)
    return store


@pytest.fixture
def make_product(db):
    counter = {"n": 0}
    
    def _make(store, price="10.00", stock=20, name=None, sku=None):
        counter["n"] += 1
        product = Product(
            store_id=store.id,
            name=name or f"Product {counter['n']}",
            sku=sku or f"SKU-{store.id}-{counter['n']}",
            price=Decimal(price),
            stock=stock,
        )
        db.add(product)
        db.commit()
        db.refresh(product)
        return product
    
    return _make


@pytest.fixture
def place_order(db):
    """Insert an order directly, bypassing the service"""
    
    def _place(store, lines, status=OrderStatus.PENDING, created_at=None):
        total = sum((Decimal(p.price) * qty for p, qty in lines), Decimal("0"))
        order = Order(store_id=store.id, total=total, status=status.value)
        if created_at is not None:
            order.created_at = created_at
        order.items = [OrderItem(product_id=p.id, quantity=qty, price=p.price) for p, qty in lines]
        db.add(order)
        db.commit()
        db.refresh(order)
        return order
    
    return _place


def make_owner(db, store, email):
    user = User(email=email, password_hash=hash_password("secret123"), name="Owner", store_id=store.id)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def owner(db, store):
    return make_owner(db, store, "owner@example.com")


@pytest.fixture
def auth_headers(owner):
    return {"Authorization": f"Bearer {create_access_token(owner)}"}


@pytest.fixture
def other_headers(db, other_store):
    user = make_owner(db, other_store, "other@example.com")
    return {"Authorization": f"Bearer {create_access_token(user)}"}

