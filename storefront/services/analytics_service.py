"""
Sales Analytics Service

Read-only aggregation over a store's orders and catalog.
"""
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from storefront.config import settings
from storefront.exceptions import NotFoundError
from storefront.models.order import OrderStatus
from storefront.repositories.order_repository import OrderRepository
from storefront.repositories.product_repository import ProductRepository
from storefront.repositories.store_repository import StoreRepository
from storefront.schemas.analytics import ChartPoint, DashboardStats, SalesData

CENT = Decimal("0.01")


class AnalyticsService:
    """Computes dashboard stats, summary inputs and the daily sales chart"""
    
    def __init__(self, db: Session):
        self.order_repository = OrderRepository(db)
        self.product_repository = ProductRepository(db)
        self.store_repository = StoreRepository(db)
    
    def _ensure_store(self, store_id: int) -> None:
        if not self.store_repository.exists(store_id):
            raise NotFoundError(f"Store with id={store_id} not found")
    
    def _revenue(self, store_id: int):
        # All statuses count here, cancelled included; the chart excludes
        # cancelled orders. Kept divergent until the intended rule is settled.
        totals = self.order_repository.get_totals(store_id)
        revenue = sum((Decimal(t) for t in totals), Decimal("0")).quantize(CENT)
        return revenue, len(totals)
    
    def get_dashboard_stats(self, store_id: int) -> DashboardStats:
        """Revenue, order count, average order value and catalog health"""
        self._ensure_store(store_id)
        
        total_revenue, total_orders = self._revenue(store_id)
        if total_orders:
            average_order_value = total_revenue / total_orders
        else:
            average_order_value = Decimal("0")
        
        return DashboardStats(
            total_revenue=total_revenue,
            total_orders=total_orders,
            average_order_value=average_order_value,
            low_stock_count=self.product_repository.count_low_stock(store_id, settings.LOW_STOCK_THRESHOLD),
            total_products=self.product_repository.count(store_id)
        )
    
    def get_sales_data(self, store_id: int) -> SalesData:
        """Aggregates for the narrative summary: best sellers and low stock"""
        self._ensure_store(store_id)
        
        total_revenue, total_orders = self._revenue(store_id)
        top_selling = [
            f"{name} ({quantity} sold)"
            for _, name, quantity in self.order_repository.get_quantity_by_product(
                store_id, settings.TOP_SELLING_LIMIT
            )
        ]
        low_stock = [
            f"{p.name} ({p.stock} left)"
            for p in self.product_repository.get_low_stock(store_id, settings.LOW_STOCK_THRESHOLD)
        ]
        
        return SalesData(
            total_revenue=total_revenue,
            total_orders=total_orders,
            top_selling=top_selling,
            low_stock=low_stock
        )
    
    def get_sales_chart_data(self, store_id: int, today: Optional[date] = None) -> List[ChartPoint]:
        """
        Daily revenue and order counts for today and the preceding days
        
        Days are UTC calendar days, oldest first, zero-filled. Cancelled
        orders are left out.
        
        Args:
            store_id: Store ID
            today: Last day of the window (defaults to the current UTC date)
        """
        self._ensure_store(store_id)
        
        today = today or datetime.now(timezone.utc).date()
        days = [today - timedelta(days=offset) for offset in range(settings.CHART_DAYS - 1, -1, -1)]
        revenue = {day: Decimal("0") for day in days}
        orders = {day: 0 for day in days}
        
        since = datetime.combine(days[0], time.min, tzinfo=timezone.utc)
        for order in self.order_repository.get_created_since(store_id, since, OrderStatus.CANCELLED):
            created_at = order.created_at
            if created_at.tzinfo is not None:
                created_at = created_at.astimezone(timezone.utc)
            day = created_at.date()
            if day not in revenue:
                continue
            revenue[day] += Decimal(order.total)
            orders[day] += 1
        
        return [
            ChartPoint(date=day, revenue=revenue[day].quantize(CENT), orders=orders[day])
            for day in days
        ]
