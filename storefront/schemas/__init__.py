"""
Schemas package
"""
from storefront.schemas.base import CamelModel, Money
from storefront.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductResponse
)
from storefront.schemas.store import (
    StoreCreate,
    StoreUpdate,
    StoreResponse,
    StorefrontResponse
)
from storefront.schemas.order import (
    OrderItemInput,
    OrderCreate,
    OrderStatusUpdate,
    OrderItemResponse,
    OrderResponse,
    OrderDetailResponse
)
from storefront.schemas.analytics import DashboardStats, SalesData, ChartPoint
from storefront.schemas.auth import (
    RegisterRequest,
    LoginRequest,
    UserResponse,
    AuthPayload,
    TokenClaims
)
from storefront.schemas.ai import (
    DescriptionRequest,
    DescriptionResponse,
    SalesSummaryResponse,
    UploadSignature
)

__all__ = [
    "CamelModel",
    "Money",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "StoreCreate",
    "StoreUpdate",
    "StoreResponse",
    "StorefrontResponse",
    "OrderItemInput",
    "OrderCreate",
    "OrderStatusUpdate",
    "OrderItemResponse",
    "OrderResponse",
    "OrderDetailResponse",
    "DashboardStats",
    "SalesData",
    "ChartPoint",
    "RegisterRequest",
    "LoginRequest",
    "UserResponse",
    "AuthPayload",
    "TokenClaims",
    "DescriptionRequest",
    "DescriptionResponse",
    "SalesSummaryResponse",
    "UploadSignature"
]
