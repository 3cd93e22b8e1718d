import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from app.auth.exceptions import (
    AlreadyExists,
    DuplicateKey,
    InternalFailure,
    InvalidCredentials,
    ValidationError,
)
from app.auth.roles import Role, resolve_role
from app.auth.security import dummy_verify, get_password_hash, verify_password
from app.auth.store import CredentialStore, UserRecord

logger = logging.getLogger(__name__)

MISSING_FIELDS = "All fields are required"
USER_EXISTS = "User already exists"
BAD_CREDENTIALS = "Invalid phone number or password"


@dataclass(frozen=True)
class RegistrationResult:
    role: Role
    user_id: str

    @property
    def message(self) -> str:
        return f"{self.role.label} registered successfully"


@dataclass(frozen=True)
class LoginResult:
    role: Role
    # Raw store id; not a signed token
    user_id: str


def _require(*values: Optional[str]) -> None:
    if any(not value for value in values):
        raise ValidationError(MISSING_FIELDS)


class AuthService:
    """Use cases: register and log in buyers and farmers."""

    def __init__(self, store: CredentialStore, strict_roles: bool = False):
        self._store = store
        self._strict_roles = strict_roles

    def register(
        self,
        role: Optional[str],
        name: Optional[str],
        phone: Optional[str],
        location: Optional[str],
        password: Optional[str],
    ) -> RegistrationResult:
        _require(role, name, phone, location, password)
        resolved = resolve_role(role, strict=self._strict_roles)
        partition = self._store.partition(resolved)

        if partition.find_by_phone(phone) is not None:
            raise AlreadyExists(USER_EXISTS)

        try:
            hashed = get_password_hash(password)
        except Exception as exc:
            # Any hasher fault (bad input, missing bcrypt backend) is a server error
            raise InternalFailure(str(exc)) from exc

        record = UserRecord(
            name=name,
            phone=phone,
            location=location,
            hashed_password=hashed,
            created_at=datetime.now(timezone.utc),
        )
        try:
            user_id = partition.insert(record)
        except DuplicateKey:
            # Lost a race with a concurrent registration for the same phone
            raise AlreadyExists(USER_EXISTS)

        logger.info("Registered %s %s (%s)", resolved.value, phone, user_id)
        return RegistrationResult(role=resolved, user_id=user_id)

    def login(
        self,
        role: Optional[str],
        phone: Optional[str],
        password: Optional[str],
    ) -> LoginResult:
        _require(role, phone, password)
        resolved = resolve_role(role, strict=self._strict_roles)

        user = self._store.partition(resolved).find_by_phone(phone)
        try:
            if user is None:
                dummy_verify()
                matched = False
            else:
                matched = verify_password(password, user.hashed_password)
        except Exception as exc:
            raise InternalFailure(str(exc)) from exc

        if not matched:
            logger.warning("Failed %s login for %s", resolved.value, phone)
            raise InvalidCredentials(BAD_CREDENTIALS)

        logger.info("Login: %s %s (%s)", resolved.value, phone, user.id)
        return LoginResult(role=resolved, user_id=user.id)
