"""
Auth API endpoints
"""
from fastapi import APIRouter, Depends, status

from storefront.api.deps import get_auth_service, get_current_user
from storefront.schemas.auth import AuthPayload, LoginRequest, RegisterRequest, TokenClaims, UserResponse
from storefront.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthPayload, status_code=status.HTTP_201_CREATED, summary="Register")
def register(
    data: RegisterRequest,
    service: AuthService = Depends(get_auth_service)
):
    """
    Create a merchant account and its store
    
    - **email**: Login email (unique)
    - **password**: Password (6-72 characters)
    - **name**: Merchant name
    - **storeName**: Store name; the store slug is derived from it
    """
    return service.register(data)


@router.post("/login", response_model=AuthPayload, summary="Login")
def login(
    data: LoginRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Exchange email and password for a bearer token"""
    return service.login(data)


@router.get("/me", response_model=UserResponse, summary="Current user")
def me(
    user: TokenClaims = Depends(get_current_user),
    service: AuthService = Depends(get_auth_service)
):
    return service.get_user(user.user_id)
