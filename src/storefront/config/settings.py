"""StoreSettings: one frozen object built from every configuration layer.

Layers, strongest first: keyword arguments (the CLI flags),
``STOREFRONT_*`` environment variables, the ``storefront.toml`` file, and
the defaults baked into :mod:`storefront.config.models`.
"""

from __future__ import annotations

from contextvars import ContextVar
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from storefront.config.discovery import read_toml, resolve_config
from storefront.config.models import (
    CurrencyConfig,
    PluginsConfig,
    PromotionsConfig,
    SecurityConfig,
    ShippingConfig,
    StoreSection,
)

# The file chosen by from_cli(), visible to settings_customise_sources().
_active_toml: ContextVar[Path | None] = ContextVar("_active_toml", default=None)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings layer backed by a parsed ``storefront.toml``."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = read_toml(toml_path) if toml_path else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


class StoreSettings(BaseSettings):
    """Settings for the storefront library and CLI.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        at: Pinned instant for the store clock; None means the system clock.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "STOREFRONT_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- output and dispatch flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    sync: bool = False
    at: datetime | None = None

    # --- storefront.toml sections ---
    store: StoreSection = Field(default_factory=StoreSection)
    promotions: PromotionsConfig = Field(default_factory=PromotionsConfig)
    currency: CurrencyConfig = Field(default_factory=CurrencyConfig)
    shipping: ShippingConfig = Field(default_factory=ShippingConfig)
    security: SecurityConfig = Field(default_factory=SecurityConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Kwargs, then env vars, then the TOML file; no dotenv or secrets dir."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, _active_toml.get()),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> StoreSettings:
        """Build settings for one CLI invocation.

        *config_path* (``--config``) wins over discovery from *start*. Flags
        passed as None were not given on the command line and are dropped so
        the lower layers apply.
        """
        toml_path = resolve_config(config_path, start)
        flags = {k: v for k, v in cli_flags.items() if v is not None}

        token = _active_toml.set(toml_path)
        try:
            return cls(config_path=toml_path, **flags)
        finally:
            _active_toml.reset(token)
