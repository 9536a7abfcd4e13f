"""
Pydantic schemas for products
"""
from pydantic import Field
from typing import Optional
from datetime import datetime

from storefront.schemas.base import CamelModel, Money


class ProductBase(CamelModel):
    """Base Product schema with common fields"""
    name: str = Field(..., min_length=1, max_length=255, description="Product name")
    description: Optional[str] = Field(None, description="Product description")
    price: Money = Field(..., ge=0, max_digits=10, decimal_places=2, description="Product price (non-negative)")
    stock: int = Field(0, ge=0, description="Stock quantity (must be non-negative)")
    image_url: Optional[str] = Field(None, max_length=500, description="Product image URL")


class ProductCreate(ProductBase):
    """Schema for creating a new product"""
    sku: str = Field(..., min_length=1, max_length=100, description="Unique stock-keeping unit")
    store_id: int = Field(..., gt=0, description="Owning store ID")


class ProductUpdate(CamelModel):
    """Schema for updating a product (all fields optional, SKU is immutable)"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    price: Optional[Money] = Field(None, ge=0, max_digits=10, decimal_places=2)
    stock: Optional[int] = Field(None, ge=0)
    image_url: Optional[str] = Field(None, max_length=500)
    active: Optional[bool] = None


class ProductResponse(ProductBase):
    """Schema for product response"""
    id: int
    sku: str
    active: bool
    store_id: int
    created_at: datetime
    updated_at: datetime
