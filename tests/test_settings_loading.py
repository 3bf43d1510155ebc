"""
Test settings loading from environment variables.

Every settings field is bound to an upper-case env alias; these tests
verify the defaults, the env overrides and that no alias is mapped twice.
"""
from __future__ import annotations

import pytest
from pydantic import ValidationError

# Import fry_api.dependencies so dotenv loads exactly once (canonical location).
import fry_api.dependencies  # noqa: F401

from fry_core.settings import OrderSettings, PointsSettings, get_app_settings


ENV_KEYS = [
    "ORDER_NUMBER_PREFIX",
    "ORDER_CANCELLATION_WINDOW_MINUTES",
    "ORDER_CURRENCY",
    "POINTS_ENABLED",
    "POINTS_CONVERSION_RATE",
    "POINTS_REDEEMABLE_CATEGORIES",
    "API_TITLE",
    "API_VERSION",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    get_app_settings.cache_clear()
    yield
    get_app_settings.cache_clear()


def _collect_alias_map(model) -> dict[str, str]:
    """
    Return map: ENV_ALIAS -> field_name for a Pydantic model.
    """
    alias_map: dict[str, str] = {}
    for field_name, field in type(model).model_fields.items():
        alias = field.alias
        if alias:
            alias_map[alias] = field_name
    return alias_map


def test_every_env_key_is_mapped_once():
    settings = get_app_settings()
    modules = {"orders": settings.orders, "points": settings.points, "api": settings.api}

    alias_to_locator: dict[str, tuple[str, str]] = {}
    for module_name, model in modules.items():
        for alias, field_name in _collect_alias_map(model).items():
            if alias in alias_to_locator:
                pytest.fail(f"Duplicate env alias mapped twice: {alias}")
            alias_to_locator[alias] = (module_name, field_name)

    assert sorted(alias_to_locator) == sorted(ENV_KEYS)
    for module_name, field_name in alias_to_locator.values():
        assert getattr(modules[module_name], field_name) is not None


def test_defaults():
    settings = get_app_settings()

    assert settings.orders.number_prefix == "FRY"
    assert settings.orders.cancellation_window_minutes == 5
    assert settings.orders.currency == "HNL"
    assert settings.points.enabled is True
    assert settings.points.conversion_rate == 10
    assert settings.points.redeemable_categories == []
    assert settings.api.log_level == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("ORDER_NUMBER_PREFIX", "POLLO")
    monkeypatch.setenv("ORDER_CANCELLATION_WINDOW_MINUTES", "10")
    monkeypatch.setenv("POINTS_ENABLED", "false")
    monkeypatch.setenv("POINTS_CONVERSION_RATE", "20")
    monkeypatch.setenv("POINTS_REDEEMABLE_CATEGORIES", '["combos", "drinks"]')

    settings = get_app_settings()

    assert settings.orders.number_prefix == "POLLO"
    assert settings.orders.cancellation_window_minutes == 10
    assert settings.points.enabled is False
    assert settings.points.conversion_rate == 20
    assert settings.points.redeemable_categories == ["combos", "drinks"]


def test_settings_are_cached():
    assert get_app_settings() is get_app_settings()


@pytest.mark.parametrize(
    "factory",
    [
        lambda: OrderSettings(number_prefix="fry-"),
        lambda: OrderSettings(cancellation_window_minutes=-1),
        lambda: PointsSettings(conversion_rate=0),
    ],
)
def test_invalid_values_are_rejected(factory):
    with pytest.raises(ValidationError):
        factory()
