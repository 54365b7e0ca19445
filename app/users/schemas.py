# app/users/schemas.py
from pydantic import BaseModel, EmailStr, Field, TypeAdapter, field_validator

_email_adapter = TypeAdapter(EmailStr)


class UserCreate(BaseModel):
    username: str = Field(..., min_length=3, max_length=30, pattern=r"^[a-zA-Z0-9_]+$")
    email: str = Field(..., max_length=255)
    password: str = Field(..., min_length=6, max_length=128)

    @field_validator("email")
    @classmethod
    def _valid_email(cls, v: str) -> str:
        # EmailStr normaliza el dominio; guardamos lo que escribió el usuario
        # para que el login con ese mismo texto lo encuentre
        try:
            _email_adapter.validate_python(v)
        except ValueError:
            raise ValueError("value is not a valid email address")
        return v


class LoginRequest(BaseModel):
    # username o email
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserOut(BaseModel):
    id: int
    username: str
    email: str

    class Config:
        from_attributes = True


class AuthResponse(BaseModel):
    message: str
    token: str
    user: UserOut
