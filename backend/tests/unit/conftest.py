# backend/tests/unit/conftest.py
import itertools

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from taskboard.main import app
from taskboard.db import Base, get_db
from taskboard import models
from taskboard.auth import create_access_token, get_password_hash
from taskboard.enums import UserRole, MemberRole
from taskboard.services.workflow_status_service import WorkflowStatusService

# One in-memory DB shared across threads (TestClient) via StaticPool
engine = create_engine(
    "sqlite+pysqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


# Enforce FKs in SQLite (off by default otherwise)
@event.listens_for(engine, "connect")
def _set_sqlite_pragma(dbapi_connection, _):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()

TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
Base.metadata.create_all(bind=engine)

# Hashing is slow with bcrypt; every fixture user shares this password
TEST_PASSWORD = "testpass123"
TEST_PASSWORD_HASH = get_password_hash(TEST_PASSWORD)

_emails = itertools.count(1)


@pytest.fixture
def connection():
    conn = engine.connect()
    tx = conn.begin()
    try:
        yield conn
    finally:
        tx.rollback()
        conn.close()

@pytest.fixture
def db_session(connection):
    session = TestingSessionLocal(bind=connection)
    try:
        yield session
    finally:
        session.close()

@pytest.fixture(autouse=True)
def _override_get_db(db_session):
    def _get_db():
        yield db_session
    app.dependency_overrides[get_db] = _get_db
    yield
    app.dependency_overrides.clear()

@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def make_user(db_session):
    """Factory creating users with a unique email"""
    def _make_user(role=UserRole.DEVELOPER, name=None):
        n = next(_emails)
        user = models.User(
            name=name or f"{role.value.title()} {n}",
            email=f"{role.value}{n}@example.com",
            password_hash=TEST_PASSWORD_HASH,
            role=role,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user
    return _make_user


def auth_headers_for(user):
    """Create authentication headers with JWT token"""
    token = create_access_token(data={"sub": user.email})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers():
    return auth_headers_for


@pytest.fixture
def manager(make_user):
    return make_user(UserRole.PROJECT_MANAGER, name="Morgan Manager")

@pytest.fixture
def developers(make_user):
    return [make_user(UserRole.DEVELOPER, name=f"Dev {i}") for i in range(3)]

@pytest.fixture
def client_user(make_user):
    return make_user(UserRole.CLIENT, name="Casey Client")

@pytest.fixture
def outsider(make_user):
    """Developer who is not a member of any fixture project"""
    return make_user(UserRole.DEVELOPER, name="Olive Outsider")

@pytest.fixture
def admin(make_user):
    return make_user(UserRole.ADMIN, name="Ada Admin")


@pytest.fixture
def make_project(db_session):
    """Factory creating a project with developer members and the default columns"""
    def _make_project(owner, developers=(), title="Website Relaunch", client=None, seed_statuses=True, **fields):
        project = models.Project(
            title=title,
            owner_id=owner.id,
            project_manager_id=owner.id if owner.role == UserRole.PROJECT_MANAGER else None,
            client_id=client.id if client else None,
            **fields,
        )
        db_session.add(project)
        db_session.flush()
        for dev in developers:
            db_session.add(models.ProjectMember(project_id=project.id, user_id=dev.id, role=MemberRole.DEVELOPER))
        db_session.commit()
        db_session.refresh(project)
        if seed_statuses:
            WorkflowStatusService.create_default_statuses(db_session, project)
        return project
    return _make_project


@pytest.fixture
def project(make_project, manager, developers, client_user):
    return make_project(manager, developers, client=client_user)


@pytest.fixture
def statuses(db_session, project):
    return WorkflowStatusService.ordered_statuses(db_session, project)


@pytest.fixture
def manager_headers(manager):
    return auth_headers_for(manager)

@pytest.fixture
def developer_headers(developers):
    return auth_headers_for(developers[0])

@pytest.fixture
def client_headers(client_user):
    return auth_headers_for(client_user)

@pytest.fixture
def outsider_headers(outsider):
    return auth_headers_for(outsider)
