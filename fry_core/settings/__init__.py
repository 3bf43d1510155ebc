# Settings package
from fry_core.settings.modules import (
    ApiSettings,
    AppSettings,
    OrderSettings,
    PointsSettings,
    get_app_settings,
)

__all__ = [
    "get_app_settings",
    "ApiSettings",
    "AppSettings",
    "OrderSettings",
    "PointsSettings",
]
