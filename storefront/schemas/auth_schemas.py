# storefront/schemas/auth_schemas.py
from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List, Literal


class SignUp(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)
    full_name: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None


class SignIn(BaseModel):
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: Literal["bearer"] = "bearer"
    is_admin: bool = False


class ProfileOut(BaseModel):
    full_name: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None

    class Config:
        from_attributes = True


class SessionOut(BaseModel):
    id: int
    email: str
    roles: List[str] = []
    is_admin: bool = False
    profile: Optional[ProfileOut] = None
