"""Abstract interface for dashboard aggregates."""

from abc import ABC, abstractmethod

from gestpro.core.entities.dashboard import DashboardStats


class IDashboardStore(ABC):
    """Read-only aggregate queries for the dashboard."""

    @abstractmethod
    async def get_stats(
        self,
        user_id: str,
        recent_limit: int = 5,
        top_limit: int = 5,
        low_stock_threshold: int = 0,
        low_stock_limit: int = 10,
    ) -> DashboardStats:
        """Compute summary figures for a tenant."""
        pass
