"""
Models package
"""
from storefront.models.store import Store, User
from storefront.models.product import Product
from storefront.models.order import Order, OrderItem, OrderStatus

__all__ = ["Store", "User", "Product", "Order", "OrderItem", "OrderStatus"]
