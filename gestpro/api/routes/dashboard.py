"""Dashboard endpoints."""

from fastapi import APIRouter, Depends

from gestpro.api.dependencies import get_app_settings, get_dash_store, get_tenant_id
from gestpro.application.dto.converters import stats_to_response
from gestpro.application.dto.responses import DashboardStatsResponse
from gestpro.config import Settings
from gestpro.infrastructure.storage.sqlite import SQLiteDashboardStore

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStatsResponse)
async def dashboard_stats(
    user_id: str = Depends(get_tenant_id),
    store: SQLiteDashboardStore = Depends(get_dash_store),
    settings: Settings = Depends(get_app_settings),
) -> DashboardStatsResponse:
    """Revenue, counts, recent invoices, top and low-stock products."""
    dashboard = settings.dashboard
    stats = await store.get_stats(
        user_id,
        recent_limit=dashboard.recent_invoices_limit,
        top_limit=dashboard.top_products_limit,
        low_stock_threshold=dashboard.low_stock_threshold,
        low_stock_limit=dashboard.low_stock_limit,
    )
    return stats_to_response(stats)
