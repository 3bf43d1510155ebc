from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from fry_core.settings.modules.api_settings import ApiSettings
from fry_core.settings.modules.order_settings import OrderSettings
from fry_core.settings.modules.points_settings import PointsSettings


class AppSettings(BaseModel):
    """
    Application settings aggregator.

    Services receive the section they need (orders, points) instead of
    reading module-level globals.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="ignore")

    orders: OrderSettings
    points: PointsSettings
    api: ApiSettings


@lru_cache()
def get_app_settings() -> AppSettings:
    return AppSettings(
        orders=OrderSettings(),
        points=PointsSettings(),
        api=ApiSettings(),
    )
