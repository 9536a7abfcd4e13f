"""
Repositories package
"""
from storefront.repositories.store_repository import StoreRepository, UserRepository
from storefront.repositories.product_repository import ProductRepository
from storefront.repositories.order_repository import OrderRepository

__all__ = ["StoreRepository", "UserRepository", "ProductRepository", "OrderRepository"]
