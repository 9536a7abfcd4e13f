"""
Product API endpoints
"""
from fastapi import APIRouter, Depends, status, Query
from typing import List, Optional

from storefront.api.deps import get_current_user, get_product_service, require_store_access
from storefront.schemas.auth import TokenClaims
from storefront.schemas.product import ProductCreate, ProductUpdate, ProductResponse
from storefront.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=List[ProductResponse], summary="Get products")
def get_products(
    skip: int = Query(0, ge=0, description="Number of products to skip"),
    take: int = Query(10, ge=1, le=100, description="Maximum number of products to return"),
    store_id: Optional[int] = Query(None, gt=0, description="Only products of this store"),
    service: ProductService = Depends(get_product_service)
):
    """
    Retrieve products, newest first
    
    - **skip**: Number of products to skip (default: 0)
    - **take**: Maximum number of products to return (default: 10, max: 100)
    - **store_id**: Restrict to one store (optional)
    """
    return service.get_products(skip=skip, limit=take, store_id=store_id)


@router.get("/{product_id}", response_model=ProductResponse, summary="Get product by ID")
def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    return service.get_product_by_id(product_id)


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED, summary="Create product")
def create_product(
    product_data: ProductCreate,
    user: TokenClaims = Depends(get_current_user),
    service: ProductService = Depends(get_product_service)
):
    """
    Create a new product in the caller's store
    
    - **name**: Product name (required)
    - **price**: Product price (required, non-negative)
    - **sku**: Stock-keeping unit (required, unique across all stores)
    - **storeId**: Store ID (required)
    - **stock**: Stock quantity (default 0)
    - **description**, **imageUrl**: optional
    """
    require_store_access(user, product_data.store_id)
    return service.create_product(product_data)


@router.patch("/{product_id}", response_model=ProductResponse, summary="Update product")
def update_product(
    product_id: int,
    product_data: ProductUpdate,
    user: TokenClaims = Depends(get_current_user),
    service: ProductService = Depends(get_product_service)
):
    """
    Update an existing product
    
    All fields are optional. Only provided fields will be updated; the SKU
    cannot be changed.
    """
    return service.update_product(product_id, product_data, store_id=user.store_id)
