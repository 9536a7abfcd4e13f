"""
Pydantic schemas for stores
"""
from pydantic import Field
from typing import List, Optional
from datetime import datetime

from storefront.schemas.base import CamelModel
from storefront.schemas.product import ProductResponse

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


class StoreCreate(CamelModel):
    """Schema for creating a store"""
    name: str = Field(..., min_length=1, max_length=255, description="Store name")
    slug: str = Field(..., min_length=1, max_length=255, pattern=SLUG_PATTERN, description="URL-safe unique slug")


class StoreUpdate(CamelModel):
    """Schema for updating store settings (all fields optional)"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    slug: Optional[str] = Field(None, min_length=1, max_length=255, pattern=SLUG_PATTERN)
    about: Optional[str] = None
    template: Optional[str] = Field(None, max_length=50)
    hero_image: Optional[str] = Field(None, max_length=500)
    primary_color: Optional[str] = Field(None, max_length=20)


class StoreResponse(CamelModel):
    """Schema for store response"""
    id: int
    name: str
    slug: str
    about: Optional[str] = None
    template: Optional[str] = None
    hero_image: Optional[str] = None
    primary_color: Optional[str] = None
    created_at: datetime


class StorefrontResponse(StoreResponse):
    """Public storefront: store with its catalog"""
    products: List[ProductResponse] = []
