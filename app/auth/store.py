"""
Credential store: user records partitioned by role.

Each partition is keyed by phone number and enforces uniqueness itself, so a
registration that races past the service's existence check is still rejected
at insert time.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional, Protocol

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.auth.exceptions import DuplicateKey, StoreUnavailable
from app.auth.roles import Role
from app.models.user import Buyer, Farmer, UserAccount

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserRecord:
    name: str
    phone: str
    location: str
    hashed_password: str
    created_at: datetime
    id: Optional[str] = None


class Partition(Protocol):
    def find_by_phone(self, phone: str) -> Optional[UserRecord]: ...

    def insert(self, record: UserRecord) -> str: ...


class CredentialStore(Protocol):
    def partition(self, role: Role) -> Partition: ...


class SqlPartition:
    """One role's table behind a SQLAlchemy session."""

    def __init__(self, db: Session, model: type[UserAccount]):
        self._db = db
        self._model = model

    def find_by_phone(self, phone: str) -> Optional[UserRecord]:
        try:
            row = self._db.query(self._model).filter(self._model.phone == phone).first()
        except SQLAlchemyError as exc:
            raise StoreUnavailable(str(exc)) from exc
        if row is None:
            return None
        return UserRecord(
            id=str(row.id),
            name=row.name,
            phone=row.phone,
            location=row.location,
            hashed_password=row.hashed_password,
            created_at=row.created_at,
        )

    def insert(self, record: UserRecord) -> str:
        row = self._model(
            name=record.name,
            phone=record.phone,
            location=record.location,
            hashed_password=record.hashed_password,
            created_at=record.created_at,
        )
        try:
            self._db.add(row)
            self._db.commit()
        except IntegrityError as exc:
            self._db.rollback()
            logger.info("Duplicate phone rejected by %s", self._model.__tablename__)
            raise DuplicateKey(record.phone) from exc
        except SQLAlchemyError as exc:
            self._db.rollback()
            raise StoreUnavailable(str(exc)) from exc
        return str(row.id)


class SqlCredentialStore:
    def __init__(self, db: Session):
        self._partitions: Dict[Role, SqlPartition] = {
            Role.BUYER: SqlPartition(db, Buyer),
            Role.FARMER: SqlPartition(db, Farmer),
        }

    def partition(self, role: Role) -> SqlPartition:
        return self._partitions[role]
