import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("EVENTS_REQUIRE_APPROVAL", "1")

import itertools

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from sanitation.api import deps
from sanitation.client.auth.gotrue import AuthUser
from sanitation.client.db.psql import session_scope
from sanitation.db import models
from sanitation.db.session import Base, SessionLocal
from sanitation.main import app


_employee_codes = itertools.count(1)


#scope : function < class < module < package < session
@pytest.fixture(scope="function")
def engine():
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(bind=test_engine)
    SessionLocal.configure(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture(scope="function")
def client(engine):
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def login():
    def _login(user_id: str = "user-1", email: str = "citizen@example.com") -> AuthUser:
        user = AuthUser(id=user_id, email=email)
        app.dependency_overrides[deps.current_user] = lambda: user
        return user

    yield _login
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def make_employee(engine):
    def _make(**overrides) -> int:
        fields = {
            "employee_id": f"NMC-SW-{next(_employee_codes):04d}",
            "name": "Meena Kumari",
            "job": "Sweeper",
            "zone": "Sataranjipura",
            "rating": 0.0,
            "total_ratings": 0,
            "is_active": True,
        }
        fields.update(overrides)
        with session_scope() as db:
            employee = models.Employee(**fields)
            db.add(employee)
            db.flush()
            return employee.id

    return _make


@pytest.fixture(scope="function")
def make_event(engine):
    def _make(**overrides) -> int:
        from datetime import date, timedelta

        fields = {
            "name": "Mega Cleanliness Drive",
            "organizer": "NMC",
            "venue": "Sitabuldi Market",
            "date": date.today() + timedelta(days=7),
            "category": "drive",
            "is_approved": True,
            "created_by": "staff-1",
        }
        fields.update(overrides)
        with session_scope() as db:
            event = models.Event(**fields)
            db.add(event)
            db.flush()
            return event.id

    return _make


@pytest.fixture(scope="function")
def make_category(engine):
    def _make(name: str = "Garbage Collection", subcategories=None) -> int:
        with session_scope() as db:
            category = models.ComplaintCategory(
                name=name,
                subcategories=subcategories or ["Garbage Overflow", "Missed Collection"],
            )
            db.add(category)
            db.flush()
            return category.id

    return _make
