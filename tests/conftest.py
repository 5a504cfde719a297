"""
Pytest fixtures: every test gets a fresh app on an in-memory SQLite database
and a fake payment gateway, so nothing reaches Stripe.
"""
import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from lawyer_point.auth import create_access_token
from lawyer_point.config import Settings
from lawyer_point.main import create_app
from lawyer_point.models import AppointmentOption, User


class FakeGateway:
    def __init__(self):
        self.amounts = []

    def create_intent(self, amount):
        self.amounts.append(amount)
        return f"pi_{len(self.amounts)}_secret_test"


@pytest.fixture
def settings():
    return Settings(DATABASE_URL="sqlite://", ACCESS_TOKEN="test-secret", LOG_LEVEL="WARNING")


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def app(settings, gateway):
    return create_app(settings, payment_gateway=gateway)


@pytest.fixture
def client(app):
    # entering the client runs the lifespan, which creates the tables
    with TestClient(app) as c:
        yield c


@pytest.fixture
def engine(app, client):
    return app.state.engine


@pytest.fixture
def make_user(engine):
    def _make_user(email, role=None, name=None):
        with Session(engine) as session:
            user = User(email=email, role=role, name=name)
            session.add(user)
            session.commit()
            session.refresh(user)
            return user.id

    return _make_user


@pytest.fixture
def make_option(engine):
    def _make_option(name, times, price=50):
        with Session(engine) as session:
            session.add(AppointmentOption(name=name, times=times, price=price))
            session.commit()

    return _make_option


@pytest.fixture
def auth_headers(settings):
    def _auth_headers(email, expires_minutes=60):
        token = create_access_token(email, settings.access_token_secret, expires_minutes=expires_minutes)
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers


@pytest.fixture
def admin_headers(make_user, auth_headers):
    make_user("admin@lawyerpoint.test", role="admin")
    return auth_headers("admin@lawyerpoint.test")
