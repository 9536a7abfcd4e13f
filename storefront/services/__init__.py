"""
Services package
"""
from storefront.services.store_service import StoreService
from storefront.services.product_service import ProductService
from storefront.services.order_service import OrderService
from storefront.services.analytics_service import AnalyticsService
from storefront.services.ai_service import AiService
from storefront.services.auth_service import AuthService
from storefront.services.upload_service import UploadService
from storefront.services.text_generation_client import TextGenerationClient

__all__ = [
    "StoreService",
    "ProductService",
    "OrderService",
    "AnalyticsService",
    "AiService",
    "AuthService",
    "UploadService",
    "TextGenerationClient"
]
