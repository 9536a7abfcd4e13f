"""
Auth Service - merchant registration, login and access tokens
"""
import logging
import re
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt
from sqlalchemy.orm import Session

from storefront.config import settings
from storefront.exceptions import AuthenticationError, ConflictError, InvalidInputError, NotFoundError
from storefront.models.store import User
from storefront.repositories.store_repository import StoreRepository, UserRepository
from storefront.schemas.auth import AuthPayload, LoginRequest, RegisterRequest, TokenClaims, UserResponse
from storefront.schemas.store import StoreResponse

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password."


def slugify(name: str) -> str:
    """Lowercase, spaces to hyphens, drop anything else that is not a word character"""
    slug = name.strip().lower().replace(" ", "-")
    return re.sub(r"[^\w-]+", "", slug, flags=re.ASCII)


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))


def create_access_token(user: User) -> str:
    """Sign a token carrying the user, their store and role"""
    payload = {
        "userId": user.id,
        "storeId": user.store_id,
        "role": user.role,
        "exp": datetime.now(timezone.utc) + timedelta(days=settings.JWT_EXPIRES_DAYS),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Optional[TokenClaims]:
    """Verify a token; None if it is malformed, forged or expired"""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
        return TokenClaims.model_validate(payload)
    except (jwt.PyJWTError, ValueError):
        return None


class AuthService:
    """Service layer for merchant accounts"""
    
    def __init__(self, db: Session):
        self.store_repository = StoreRepository(db)
        self.user_repository = UserRepository(db)
    
    def register(self, data: RegisterRequest) -> AuthPayload:
        """
        Create a user together with their store
        
        Raises:
            ConflictError: If the email or derived store slug is taken
            InvalidInputError: If the store name yields an empty slug
        """
        if self.user_repository.get_by_email(data.email):
            raise ConflictError("User already exists with this email.")
        
        slug = slugify(data.store_name)
        if not slug:
            raise InvalidInputError(f"Store name '{data.store_name}' cannot be turned into a URL slug")
        if self.store_repository.get_by_slug(slug):
            raise ConflictError(f"Store slug '{slug}' is already taken.")
        
        user = self.store_repository.create_with_owner(
            {"name": data.store_name, "slug": slug},
            {
                "email": data.email,
                "password_hash": hash_password(data.password),
                "name": data.name,
                "role": "OWNER",
            }
        )
        logger.info("Registered user %s with store '%s'", user.id, slug)
        return self._payload(user)
    
    def login(self, data: LoginRequest) -> AuthPayload:
        """
        Exchange credentials for a token
        
        Raises:
            AuthenticationError: If the email is unknown or the password is wrong
        """
        user = self.user_repository.get_by_email(data.email)
        if not user or not verify_password(data.password, user.password_hash):
            raise AuthenticationError(INVALID_CREDENTIALS)
        return self._payload(user)
    
    def get_user(self, user_id: int) -> UserResponse:
        user = self.user_repository.get_by_id(user_id)
        if not user:
            raise NotFoundError(f"User with id={user_id} not found")
        return UserResponse.model_validate(user)
    
    @staticmethod
    def _payload(user: User) -> AuthPayload:
        return AuthPayload(
            token=create_access_token(user),
            user=UserResponse.model_validate(user),
            store=StoreResponse.model_validate(user.store)
        )
