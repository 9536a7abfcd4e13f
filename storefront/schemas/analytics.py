"""
Pydantic schemas for sales analytics
"""
import datetime
from typing import List

from storefront.schemas.base import CamelModel, Money


class DashboardStats(CamelModel):
    """Headline numbers for the merchant dashboard"""
    total_revenue: Money
    total_orders: int
    average_order_value: Money
    low_stock_count: int
    total_products: int


class SalesData(CamelModel):
    """Aggregates fed to the narrative sales summary"""
    total_revenue: Money
    total_orders: int
    top_selling: List[str]
    low_stock: List[str]


class ChartPoint(CamelModel):
    """One calendar day of the sales chart"""
    date: datetime.date
    revenue: Money
    orders: int
