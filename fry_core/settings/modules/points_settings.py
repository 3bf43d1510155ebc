from __future__ import annotations

from typing import List

from pydantic import Field

from fry_core.settings.base import FryBaseSettings


class PointsSettings(FryBaseSettings):
    """
    Loyalty points settings.
    Loaded from .env file with exact variable name matching.

    POINTS_REDEEMABLE_CATEGORIES is a JSON list, e.g. '["combos", "drinks"]'.
    """

    enabled: bool = Field(True, alias="POINTS_ENABLED")

    # Points per currency unit when pricing prizes
    conversion_rate: int = Field(10, alias="POINTS_CONVERSION_RATE", gt=0)

    redeemable_categories: List[str] = Field(
        default_factory=list, alias="POINTS_REDEEMABLE_CATEGORIES"
    )
