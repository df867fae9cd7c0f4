import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTO_CREATE_TABLES"] = "false"
os.environ["PASSWORD_BCRYPT_ROUNDS"] = "4"
os.environ["JWT_SECRET"] = "test-secret"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import get_session
from main import app
from models import Base, Role
from schemas.building import BuildingCreate
from schemas.room import RoomCreate
from schemas.user import UserCreate
from services import facility_service, occupancy_service
from services.auth_service import create_access_token, create_user


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def building(db):
    return facility_service.create_building(db, "A")


@pytest.fixture
def make_room(db, building):
    def _make_room(name="101", max_capacity=4, **fields):
        return occupancy_service.create_room(
            db, RoomCreate(name=name, building_id=building.id, max_capacity=max_capacity, **fields)
        )
    return _make_room


@pytest.fixture
def client(session_factory):
    def override_get_session():
        session = session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin(db):
    return create_user(db, UserCreate(username="admin", password="admin-pass", full_name="Admin", role=Role.ADMIN))


@pytest.fixture
def staff(db):
    return create_user(db, UserCreate(username="staff", password="staff-pass", full_name="Staff", role=Role.STAFF))


@pytest.fixture
def admin_headers(admin):
    return {"Authorization": f"Bearer {create_access_token(admin)}"}


@pytest.fixture
def staff_headers(staff):
    return {"Authorization": f"Bearer {create_access_token(staff)}"}
