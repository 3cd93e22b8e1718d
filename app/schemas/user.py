from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

# Fields are optional here so the service can answer missing input with its
# own "All fields are required" error instead of a 422.
class AuthRequest(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    role: Optional[str] = None
    phone: Optional[str] = None
    password: Optional[str] = None

class RegisterRequest(AuthRequest):
    name: Optional[str] = None
    location: Optional[str] = None

class LoginRequest(AuthRequest):
    pass

class RegisterResponse(BaseModel):
    message: str

class LoginResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str = "Login successful"
    role: str
    user_id: str = Field(alias="userId")
