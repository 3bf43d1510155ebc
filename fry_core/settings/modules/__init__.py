# Settings modules
from .api_settings import ApiSettings
from .app_settings import AppSettings, get_app_settings
from .order_settings import OrderSettings
from .points_settings import PointsSettings

__all__ = [
    "ApiSettings",
    "AppSettings",
    "get_app_settings",
    "OrderSettings",
    "PointsSettings",
]
