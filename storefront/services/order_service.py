"""
Order Service - Business Logic Layer

Builds orders from (product, quantity) lines with a price snapshot per line,
tracks order status, and lists a store's orders.
"""
import logging
from decimal import Decimal
from typing import Dict, FrozenSet, List, Optional

from sqlalchemy.orm import Session

from storefront.config import settings
from storefront.exceptions import AuthorizationError, ConflictError, InvalidInputError, NotFoundError
from storefront.models.order import Order, OrderStatus
from storefront.publishers.event_publisher import EventPublisher
from storefront.repositories.order_repository import OrderRepository
from storefront.repositories.product_repository import ProductRepository
from storefront.repositories.store_repository import StoreRepository
from storefront.schemas.order import OrderCreate, OrderResponse, OrderDetailResponse

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")

# Edges allowed under the "strict" status policy
STRICT_TRANSITIONS: Dict[OrderStatus, FrozenSet[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.PROCESSING, OrderStatus.CANCELLED}),
    OrderStatus.PROCESSING: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.COMPLETED}),
    OrderStatus.COMPLETED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


def check_transition(current: OrderStatus, new: OrderStatus, policy: str) -> None:
    """
    Validate a status change against the configured policy
    
    Raises:
        ConflictError: If the strict policy forbids the transition
    """
    if policy != "strict" or current == new:
        return
    if new not in STRICT_TRANSITIONS[current]:
        raise ConflictError(
            f"Cannot change order status from {current.value} to {new.value}"
        )


class OrderService:
    """Service layer for order business logic"""
    
    def __init__(self, db: Session, event_publisher: Optional[EventPublisher] = None):
        self.db = db
        self.repository = OrderRepository(db)
        self.product_repository = ProductRepository(db)
        self.store_repository = StoreRepository(db)
        self.event_publisher = event_publisher or EventPublisher()
    
    def get_orders(self, store_id: int, skip: int = 0, limit: int = 10) -> List[OrderDetailResponse]:
        """Get a store's orders, newest first, with items and products"""
        if not self.store_repository.exists(store_id):
            raise NotFoundError(f"Store with id={store_id} not found")
        orders = self.repository.get_by_store(store_id, skip=skip, limit=limit)
        return [OrderDetailResponse.model_validate(o) for o in orders]
    
    def get_order(self, order_id: int) -> Order:
        order = self.repository.get_by_id(order_id)
        if not order:
            raise NotFoundError(f"Order with id={order_id} not found")
        return order
    
    def create_order(self, order_data: OrderCreate) -> OrderResponse:
        """
        Create new order
        
        Steps:
        1. Reject empty orders and unknown stores
        2. Resolve every product, in input order, and snapshot its price
        3. Calculate line subtotals and the order total
        4. Optionally reserve stock, then save order and items in one transaction
        5. Publish OrderCreated event (if enabled)
        
        Stock is not decremented unless RESERVE_STOCK_ON_ORDER is set, so
        nothing prevents overselling by default.
        
        Args:
            order_data: Order creation data
        
        Returns:
            Created order with its items
        
        Raises:
            InvalidInputError: If there are no items
            NotFoundError: If the store or any product does not exist
            ConflictError: If stock reservation is enabled and a line cannot be served
        """
        if not order_data.items:
            raise InvalidInputError("An order must contain at least one item")
        if not self.store_repository.exists(order_data.store_id):
            raise NotFoundError(f"Store with id={order_data.store_id} not found")
        
        total = Decimal("0")
        items_data = []
        for item in order_data.items:
            product = self.product_repository.get_by_id(item.product_id)
            if not product or product.store_id != order_data.store_id:
                raise NotFoundError(f"Product {item.product_id} not found")
            
            price = Decimal(product.price)
            total += price * item.quantity
            items_data.append({
                'product_id': product.id,
                'quantity': item.quantity,
                'price': price
            })
        
        order_dict = {
            'store_id': order_data.store_id,
            'total': total.quantize(CENT),
            'status': OrderStatus.PENDING.value,
            'customer_name': order_data.customer_name,
            'customer_email': order_data.customer_email,
            'shipping_address': order_data.shipping_address
        }
        
        try:
            if settings.RESERVE_STOCK_ON_ORDER:
                for item in order_data.items:
                    if not self.product_repository.reserve_stock(item.product_id, item.quantity):
                        raise ConflictError(
                            f"Insufficient stock for product {item.product_id}. "
                            f"Requested: {item.quantity}"
                        )
            order = self.repository.add_with_items(order_dict, items_data)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(order)
        
        logger.info("Order %s created for store %s, total %s", order.id, order.store_id, order.total)
        
        if settings.EVENTS_ENABLED:
            published = self.event_publisher.publish_order_created({
                'order_id': order.id,
                'store_id': order.store_id,
                'total': str(order.total),
                'status': order.status,
                'customer_email': order.customer_email,
                'items': [
                    {'product_id': i.product_id, 'quantity': i.quantity, 'price': str(i.price)}
                    for i in order.items
                ]
            })
            if not published:
                logger.warning("OrderCreated event for order %s was not published", order.id)
        
        return OrderResponse.model_validate(order)
    
    def update_order_status(
        self,
        order_id: int,
        new_status: OrderStatus,
        store_id: Optional[int] = None
    ) -> OrderResponse:
        """
        Update order status
        
        Under the default "permissive" policy any status may follow any
        other; "strict" enforces STRICT_TRANSITIONS.
        
        Args:
            order_id: Order ID
            new_status: New status value
            store_id: When given, the order must belong to this store
        
        Returns:
            Updated order with its items
        """
        order = self.get_order(order_id)
        if store_id is not None and order.store_id != store_id:
            raise AuthorizationError("You do not have access to this order")
        
        old_status = OrderStatus(order.status)
        check_transition(old_status, new_status, settings.ORDER_STATUS_POLICY)
        
        order = self.repository.update_status(order, new_status)
        logger.info("Order %s status %s -> %s", order.id, old_status.value, order.status)
        
        if settings.EVENTS_ENABLED:
            self.event_publisher.publish_order_status_changed({
                'order_id': order.id,
                'store_id': order.store_id,
                'old_status': old_status.value,
                'new_status': order.status,
                'updated_at': order.updated_at.isoformat()
            })
        
        return OrderResponse.model_validate(order)
