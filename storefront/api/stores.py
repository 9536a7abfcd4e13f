"""
Store API endpoints
"""
from fastapi import APIRouter, Depends, status
from typing import List

from storefront.api.deps import get_current_user, get_store_service, require_store_access
from storefront.schemas.auth import TokenClaims
from storefront.schemas.store import StoreCreate, StoreUpdate, StoreResponse, StorefrontResponse
from storefront.services.store_service import StoreService

router = APIRouter(prefix="/stores", tags=["stores"])


@router.get("", response_model=List[StoreResponse], summary="Get all stores")
def get_stores(service: StoreService = Depends(get_store_service)):
    return service.get_all_stores()


@router.get("/{slug}", response_model=StorefrontResponse, summary="Get storefront by slug")
def get_store(
    slug: str,
    service: StoreService = Depends(get_store_service)
):
    """
    Public storefront: the store and its products
    
    - **slug**: Store slug
    """
    return service.get_storefront(slug)


@router.post("", response_model=StoreResponse, status_code=status.HTTP_201_CREATED, summary="Create store")
def create_store(
    store_data: StoreCreate,
    service: StoreService = Depends(get_store_service)
):
    """
    Create a store
    
    - **name**: Store name (required)
    - **slug**: Lowercase letters, digits and single hyphens (required, unique)
    """
    return service.create_store(store_data)


@router.patch("/{store_id}", response_model=StoreResponse, summary="Update store settings")
def update_store(
    store_id: int,
    store_data: StoreUpdate,
    user: TokenClaims = Depends(get_current_user),
    service: StoreService = Depends(get_store_service)
):
    """
    Update store settings
    
    All fields are optional. Only provided fields will be updated.
    """
    require_store_access(user, store_id)
    return service.update_store(store_id, store_data)
