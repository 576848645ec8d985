import os

# konfiguracja musi byc ustawiona przed importem freshcart.*
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CELERY_ALWAYS_EAGER"] = "1"
os.environ["CELERY_BROKER_URL"] = "memory://"
os.environ["CELERY_RESULT_BACKEND"] = "cache+memory://"
os.environ["PAYMENT_GATEWAY"] = "fake"
os.environ["RAZORPAY_KEY_SECRET"] = "testsecret"
os.environ["RAZORPAY_WEBHOOK_SECRET"] = "webhooksecret"
os.environ["DELIVERY_FEE"] = "50.00"
os.environ["SEED_DEMO_DATA"] = "0"

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from freshcart.api.deps import get_cart_repo, get_gateway
from freshcart.data.database import Base, SessionLocal, engine
from freshcart.data.models import CategoryModel, ProductModel, UserModel
from freshcart.main import app
from freshcart.repos.cart_repo import MemoryCartRepo
from freshcart.services.gateway_client import FakeGatewayClient


class RecordingNotifications:
    def __init__(self):
        self.orders = []
        self.payments = []

    def send_order_notification(self, user_id, order_id):
        self.orders.append((user_id, order_id))

    def send_payment_notification(self, order_id, payment_status):
        self.payments.append((order_id, payment_status))


@pytest.fixture(autouse=True)
def reset_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def notifications():
    return RecordingNotifications()


@pytest.fixture
def cart_repo():
    return MemoryCartRepo()


@pytest.fixture
def gateway():
    return FakeGatewayClient()


@pytest.fixture
def client(cart_repo, gateway):
    app.dependency_overrides[get_cart_repo] = lambda: cart_repo
    app.dependency_overrides[get_gateway] = lambda: gateway
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def user(db):
    u = UserModel(id="user-1", name="Asha", email="asha@example.com", role="user")
    db.add(u)
    db.commit()
    return u


@pytest.fixture
def admin(db):
    u = UserModel(id="admin-1", name="Ravi", email="ravi@example.com", role="admin")
    db.add(u)
    db.commit()
    return u


@pytest.fixture
def category(db):
    c = CategoryModel(name="Vegetables", description="Organic vegetables")
    db.add(c)
    db.commit()
    return c


@pytest.fixture
def product(db, category):
    p = ProductModel(
        id="p1",
        name="Organic Tomatoes",
        description="Vine ripened",
        price=Decimal("100.00"),
        category_id=category.id,
        category=category.name,
        image_url="/img/tomatoes.jpg",
        in_stock=40,
    )
    db.add(p)
    db.commit()
    return p
