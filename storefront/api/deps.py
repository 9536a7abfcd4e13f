"""
Shared API dependencies: authentication and service factories
"""
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from storefront.database import get_db
from storefront.exceptions import AuthenticationError, AuthorizationError
from storefront.schemas.auth import TokenClaims
from storefront.services.ai_service import AiService
from storefront.services.analytics_service import AnalyticsService
from storefront.services.auth_service import AuthService, decode_access_token
from storefront.services.order_service import OrderService
from storefront.services.product_service import ProductService
from storefront.services.store_service import StoreService
from storefront.services.text_generation_client import TextGenerationClient

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> TokenClaims:
    """Claims of the bearer token; 401 when missing or invalid"""
    if credentials is None:
        raise AuthenticationError("User is not authenticated")
    claims = decode_access_token(credentials.credentials)
    if claims is None:
        raise AuthenticationError("User is not authenticated")
    return claims


def require_store_access(user: TokenClaims, store_id: int) -> None:
    """403 unless the token was issued for this store"""
    if user.store_id != store_id:
        raise AuthorizationError("You do not have access to this store")


def get_store_service(db: Session = Depends(get_db)) -> StoreService:
    return StoreService(db)


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(db)


def get_order_service(db: Session = Depends(get_db)) -> OrderService:
    return OrderService(db)


def get_analytics_service(db: Session = Depends(get_db)) -> AnalyticsService:
    return AnalyticsService(db)


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(db)


def get_text_generation_client() -> TextGenerationClient:
    return TextGenerationClient()


def get_ai_service(client: TextGenerationClient = Depends(get_text_generation_client)) -> AiService:
    return AiService(client)
