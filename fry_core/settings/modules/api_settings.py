from __future__ import annotations

from pydantic import Field

from fry_core.settings.base import FryBaseSettings


class ApiSettings(FryBaseSettings):
    """
    HTTP API settings.
    Loaded from .env file with exact variable name matching.
    """

    title: str = Field("Fry Orders API", alias="API_TITLE")
    version: str = Field("1.0.0", alias="API_VERSION")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
