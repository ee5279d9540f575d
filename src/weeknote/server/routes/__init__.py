"""Route registration helpers."""

from .daily_log import register_daily_log_routes
from .health import register_health_routes

__all__ = [
    "register_daily_log_routes",
    "register_health_routes",
]
