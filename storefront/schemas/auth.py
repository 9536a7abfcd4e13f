"""
Pydantic schemas for registration and login
"""
from pydantic import Field, EmailStr
from datetime import datetime

from storefront.schemas.base import CamelModel
from storefront.schemas.store import StoreResponse


class RegisterRequest(CamelModel):
    """Merchant sign-up: creates the user and their store"""
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)
    name: str = Field(..., min_length=1, max_length=255)
    store_name: str = Field(..., min_length=1, max_length=255)


class LoginRequest(CamelModel):
    """Credentials"""
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=72)


class UserResponse(CamelModel):
    """Public user fields"""
    id: int
    email: str
    name: str
    role: str
    store_id: int
    created_at: datetime


class AuthPayload(CamelModel):
    """Issued token with the user and store it grants access to"""
    token: str
    user: UserResponse
    store: StoreResponse


class TokenClaims(CamelModel):
    """Decoded token contents"""
    user_id: int
    store_id: int
    role: str
