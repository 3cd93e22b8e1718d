import threading
from typing import Dict, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.auth.exceptions import DuplicateKey
from app.auth.roles import Role
from app.auth.store import UserRecord
from app.db.init import init_db
from app.db.session import Base, get_db
from app.main import app


class InMemoryPartition:
    """Phone-keyed partition; insert enforces uniqueness under a lock."""

    def __init__(self):
        self._by_phone: Dict[str, UserRecord] = {}
        self._lock = threading.Lock()
        self._id = 0

    def find_by_phone(self, phone: str) -> Optional[UserRecord]:
        return self._by_phone.get(phone)

    def insert(self, record: UserRecord) -> str:
        with self._lock:
            if record.phone in self._by_phone:
                raise DuplicateKey(record.phone)
            self._id += 1
            user_id = f"{id(self):x}-{self._id}"
            self._by_phone[record.phone] = UserRecord(
                id=user_id,
                name=record.name,
                phone=record.phone,
                location=record.location,
                hashed_password=record.hashed_password,
                created_at=record.created_at,
            )
            return user_id

    def __len__(self) -> int:
        return len(self._by_phone)


class InMemoryStore:
    def __init__(self):
        self.partitions = {role: InMemoryPartition() for role in Role}

    def partition(self, role: Role) -> InMemoryPartition:
        return self.partitions[role]


@pytest.fixture
def memory_store():
    return InMemoryStore()


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    # Not entered as a context manager, so startup (and its file database) never runs
    yield TestClient(app)
    app.dependency_overrides.clear()


class UnreachableSession(Session):
    """Session whose every read fails as if the database had gone away."""

    def _unreachable(self, *args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database is unreachable"))

    query = _unreachable
    get = _unreachable
    execute = _unreachable


@pytest.fixture
def unreachable_client(engine):
    def override_get_db():
        db = UnreachableSession(bind=engine)
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
