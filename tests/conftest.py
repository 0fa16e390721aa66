# tests/conftest.py

import pytest
from fastapi.testclient import TestClient
from sqlmodel import SQLModel, Session, create_engine
from sqlmodel.pool import StaticPool

from salon.main import app
from salon.db import get_session
from salon.auth import hash_password
from salon.models import User

ADMIN = {"username": "admin", "password": "admin-password"}
CUSTOMER = {"username": "maria", "password": "maria-password"}


@pytest.fixture(name="session")
def session_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(session: Session):
    app.dependency_overrides[get_session] = lambda: session
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


def login(client: TestClient, creds: dict):
    resp = client.post("/api/auth/login", data=creds)
    assert resp.status_code == 200, resp.text
    return resp.json()["access_token"]


@pytest.fixture(name="admin_client")
def admin_client_fixture(session: Session, client: TestClient):
    session.add(User(
        username=ADMIN["username"],
        password_hash=hash_password(ADMIN["password"]),
        is_admin=True,
    ))
    session.commit()
    admin = TestClient(app)
    login(admin, ADMIN)
    return admin


@pytest.fixture(name="customer_client")
def customer_client_fixture(session: Session, client: TestClient):
    session.add(User(
        username=CUSTOMER["username"],
        password_hash=hash_password(CUSTOMER["password"]),
    ))
    session.commit()
    customer = TestClient(app)
    login(customer, CUSTOMER)
    return customer
