"""
Pydantic schemas for order request/response validation
"""
from pydantic import Field, EmailStr
from typing import List, Optional
from datetime import datetime

from storefront.models.order import OrderStatus
from storefront.schemas.base import CamelModel, Money
from storefront.schemas.product import ProductResponse


class OrderItemInput(CamelModel):
    """One requested order line"""
    product_id: int = Field(..., gt=0, description="Product ID")
    quantity: int = Field(..., gt=0, description="Quantity to order")


class OrderCreate(CamelModel):
    """Schema for creating a new order"""
    store_id: int = Field(..., gt=0, description="Store ID")
    items: List[OrderItemInput] = Field(..., min_length=1, description="Order lines")
    customer_name: Optional[str] = Field(None, max_length=255, description="Customer name")
    customer_email: Optional[EmailStr] = Field(None, description="Customer email address")
    shipping_address: Optional[str] = Field(None, description="Shipping address")


class OrderStatusUpdate(CamelModel):
    """Schema for updating order status"""
    status: OrderStatus = Field(..., description="Order status")


class OrderItemResponse(CamelModel):
    """Order line as created"""
    id: int
    product_id: int
    quantity: int
    price: Money


class OrderItemDetailResponse(OrderItemResponse):
    """Order line with its product, for order listings"""
    product: ProductResponse


class OrderResponse(CamelModel):
    """Schema for order response"""
    id: int
    store_id: int
    total: Money
    status: OrderStatus
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    shipping_address: Optional[str] = None
    created_at: datetime
    items: List[OrderItemResponse] = []


class OrderDetailResponse(OrderResponse):
    """Order with each item's product"""
    items: List[OrderItemDetailResponse] = []
