"""
Sales analytics API endpoints
"""
from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from typing import List

from storefront.api.deps import get_ai_service, get_analytics_service, get_current_user, require_store_access
from storefront.schemas.ai import SalesSummaryResponse
from storefront.schemas.analytics import ChartPoint, DashboardStats
from storefront.schemas.auth import TokenClaims
from storefront.services.ai_service import AiService
from storefront.services.analytics_service import AnalyticsService

router = APIRouter(prefix="/stores/{store_id}", tags=["analytics"])


@router.get("/dashboard-stats", response_model=DashboardStats, summary="Dashboard stats")
def dashboard_stats(
    store_id: int,
    user: TokenClaims = Depends(get_current_user),
    service: AnalyticsService = Depends(get_analytics_service)
):
    """
    Revenue, order count, average order value, low-stock and product counts
    
    Revenue includes orders of every status.
    """
    require_store_access(user, store_id)
    return service.get_dashboard_stats(store_id)


@router.get("/sales-chart", response_model=List[ChartPoint], summary="Sales chart data")
def sales_chart_data(
    store_id: int,
    user: TokenClaims = Depends(get_current_user),
    service: AnalyticsService = Depends(get_analytics_service)
):
    """Revenue and order count per day for the last 7 days, cancelled orders excluded"""
    require_store_access(user, store_id)
    return service.get_sales_chart_data(store_id)


@router.post("/sales-summary", response_model=SalesSummaryResponse, summary="Generate sales summary")
async def generate_sales_summary(
    store_id: int,
    user: TokenClaims = Depends(get_current_user),
    analytics: AnalyticsService = Depends(get_analytics_service),
    ai: AiService = Depends(get_ai_service)
):
    """Narrative summary of the store's sales written by the text-generation model"""
    require_store_access(user, store_id)
    data = await run_in_threadpool(analytics.get_sales_data, store_id)
    return SalesSummaryResponse(summary=await ai.generate_sales_summary(data))
