"""
Order API endpoints
"""
from fastapi import APIRouter, Depends, status, Query
from typing import List

from storefront.api.deps import get_current_user, get_order_service, require_store_access
from storefront.schemas.auth import TokenClaims
from storefront.schemas.order import (
    OrderCreate,
    OrderStatusUpdate,
    OrderResponse,
    OrderDetailResponse
)
from storefront.services.order_service import OrderService

router = APIRouter(tags=["orders"])


@router.get(
    "/stores/{store_id}/orders",
    response_model=List[OrderDetailResponse],
    summary="Get a store's orders"
)
def get_orders(
    store_id: int,
    skip: int = Query(0, ge=0, description="Number of orders to skip"),
    take: int = Query(10, ge=1, le=100, description="Maximum number of orders to return"),
    user: TokenClaims = Depends(get_current_user),
    service: OrderService = Depends(get_order_service)
):
    """
    Retrieve a store's orders, newest first, with items and products
    
    - **skip**: Number of orders to skip (default: 0)
    - **take**: Maximum number of orders to return (default: 10, max: 100)
    """
    require_store_access(user, store_id)
    return service.get_orders(store_id, skip=skip, limit=take)


@router.post("/orders", response_model=OrderResponse, status_code=status.HTTP_201_CREATED, summary="Create order")
def create_order(
    order_data: OrderCreate,
    service: OrderService = Depends(get_order_service)
):
    """
    Create a new order (storefront checkout)
    
    Process:
    1. Resolve each product and snapshot its current price
    2. Calculate the total
    3. Save the order and its items in one transaction
    
    - **storeId**: Store ID (required)
    - **items**: List of {productId, quantity} (required, at least one)
    - **customerName**, **customerEmail**, **shippingAddress**: optional
    """
    return service.create_order(order_data)


@router.patch("/orders/{order_id}/status", response_model=OrderResponse, summary="Update order status")
def update_order_status(
    order_id: int,
    status_data: OrderStatusUpdate,
    user: TokenClaims = Depends(get_current_user),
    service: OrderService = Depends(get_order_service)
):
    """
    Update order status
    
    - **order_id**: Order ID
    - **status**: PENDING, PROCESSING, SHIPPED, COMPLETED or CANCELLED
    """
    return service.update_order_status(order_id, status_data.status, store_id=user.store_id)
