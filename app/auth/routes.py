from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.config import settings
from app.db.session import get_db
from app.schemas.user import RegisterRequest, RegisterResponse, LoginRequest, LoginResponse
from app.auth.service import AuthService
from app.auth.store import SqlCredentialStore

router = APIRouter(tags=["auth"])


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(SqlCredentialStore(db), strict_roles=settings.strict_roles)


# Bodies are optional: an absent or null body is treated as an empty form,
# so it fails with "All fields are required" rather than a 422.

# REGISTER: buyer or farmer, keyed by phone within the role
@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register_user(
    user_data: Optional[RegisterRequest] = None,
    service: AuthService = Depends(get_auth_service)
):
    user_data = user_data or RegisterRequest()
    result = service.register(
        role=user_data.role,
        name=user_data.name,
        phone=user_data.phone,
        location=user_data.location,
        password=user_data.password,
    )
    return RegisterResponse(message=result.message)

# LOGIN: returns the role and the stored user id (no token is issued)
@router.post("/login", response_model=LoginResponse)
def login_user(
    credentials: Optional[LoginRequest] = None,
    service: AuthService = Depends(get_auth_service)
):
    credentials = credentials or LoginRequest()
    result = service.login(
        role=credentials.role,
        phone=credentials.phone,
        password=credentials.password,
    )
    return LoginResponse(role=result.role.value, user_id=result.user_id)
