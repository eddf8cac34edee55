"""Domain models for the sales performance dashboard.

This package contains the value objects produced and consumed by the
normalizer / aggregator services and the load pipeline.
"""

from .config_models import DashboardConfig
from .dashboard_data import DashboardData, WeekPoint
from .load_error import LoadErrorKind, LoadErrorRecord
from .sales_record import Rank, SalesRecord

__all__ = [
    # Configuration models
    "DashboardConfig",
    # Record models
    "Rank",
    "SalesRecord",
    # Pipeline output
    "DashboardData",
    "WeekPoint",
    # Failure reporting
    "LoadErrorKind",
    "LoadErrorRecord",
]
