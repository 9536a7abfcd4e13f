"""
Order Repository - Data Access Layer
"""
from datetime import datetime
from typing import List, Optional, Tuple
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import desc, func

from storefront.models.order import Order, OrderItem, OrderStatus
from storefront.models.product import Product


class OrderRepository:
    """Repository for Order CRUD and aggregate queries"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def get_by_store(self, store_id: int, skip: int = 0, limit: int = 10) -> List[Order]:
        """Get a store's orders, newest first, with items and their products"""
        return self.db.query(Order).options(
            selectinload(Order.items).selectinload(OrderItem.product)
        ).filter(
            Order.store_id == store_id
        ).order_by(
            desc(Order.created_at), desc(Order.id)
        ).offset(skip).limit(limit).all()
    
    def get_by_id(self, order_id: int) -> Optional[Order]:
        """Get order by ID"""
        return self.db.query(Order).filter(Order.id == order_id).first()
    
    def add_with_items(self, order_data: dict, items_data: List[dict]) -> Order:
        """
        Stage an order and its items in the current transaction
        
        The caller commits, so that everything else done in the same
        transaction (stock reservation) succeeds or fails with the order.
        """
        order = Order(**order_data)
        order.items = [OrderItem(**item) for item in items_data]
        self.db.add(order)
        self.db.flush()
        return order
    
    def update_status(self, order: Order, new_status: OrderStatus) -> Order:
        """Overwrite the order status"""
        order.status = new_status.value
        self.db.commit()
        self.db.refresh(order)
        return order
    
    def get_totals(self, store_id: int) -> List:
        """Totals of every order of a store, all statuses included"""
        return [row.total for row in self.db.query(Order.total).filter(Order.store_id == store_id).all()]
    
    def get_quantity_by_product(self, store_id: int, limit: int) -> List[Tuple[int, str, int]]:
        """
        Rank products by units sold across the store's orders
        
        Ties are broken by product id ascending.
        
        Returns:
            (product_id, product_name, quantity_sold) tuples, best sellers first
        """
        quantity_sold = func.sum(OrderItem.quantity).label("quantity_sold")
        rows = self.db.query(
            Product.id, Product.name, quantity_sold
        ).join(
            OrderItem, OrderItem.product_id == Product.id
        ).join(
            Order, Order.id == OrderItem.order_id
        ).filter(
            Order.store_id == store_id
        ).group_by(
            Product.id, Product.name
        ).order_by(
            desc(quantity_sold), Product.id
        ).limit(limit).all()
        return [(row[0], row[1], int(row[2])) for row in rows]
    
    def get_created_since(self, store_id: int, since: datetime, exclude_status: OrderStatus) -> List[Order]:
        """Orders created at or after `since` whose status is not `exclude_status`"""
        return self.db.query(Order).filter(
            Order.store_id == store_id,
            Order.created_at >= since,
            Order.status != exclude_status.value
        ).all()
