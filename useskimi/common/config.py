"""
Configuration management for the usEskimi bidder adapter.

Supports loading from environment variables and YAML files.
The only value the adapter itself consumes is the endpoint template.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# ---------------------------------------------------------------------------
# Adapter
# ---------------------------------------------------------------------------

class AdapterSettings(BaseSettings):
    """Bidder adapter configuration."""

    model_config = SettingsConfigDict(env_prefix="USESKIMI_ADAPTER__")

    bidder_name: str = "useskimi"

    # Must contain the {MediaType} macro to route per media type
    endpoint: str = "https://useskimi.example.com/{MediaType}/openrtb"

    enabled: bool = True

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Adapter endpoint template must not be empty")
        return v


# ---------------------------------------------------------------------------
# Observability
# ---------------------------------------------------------------------------

class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="USESKIMI_LOGGING__")

    level: str = "INFO"
    format: Literal["json", "console"] = "json"


# ---------------------------------------------------------------------------
# Root Settings
# ---------------------------------------------------------------------------

class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="USESKIMI_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Application
    app_name: str = "usEskimi Adapter"
    app_version: str = "0.1.0"
    env: Literal["dev", "prod", "test"] = "dev"

    # Nested settings
    adapter: AdapterSettings = Field(default_factory=AdapterSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("env")
    @classmethod
    def validate_env(cls, v: str) -> str:
        if v not in ("dev", "prod", "test"):
            raise ValueError(f"Invalid environment: {v}")
        return v


# ---------------------------------------------------------------------------
# YAML Loader
# ---------------------------------------------------------------------------

def load_yaml_config(config_path: Path) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}
    with open(config_path) as f:
        return yaml.safe_load(f) or {}


def merge_configs(base: dict, override: dict) -> dict:
    """Deep-merge two configuration dictionaries."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value
    return result


_SECTION_CLASSES: dict[str, type[BaseSettings]] = {
    "adapter": AdapterSettings,
    "logging": LoggingSettings,
}

CONFIG_DIR = Path(__file__).parent.parent.parent / "configs"


def load_settings(env: str = "dev", config_dir: Path = CONFIG_DIR) -> Settings:
    """
    Build settings for ``env`` from YAML files and environment variables.

    Loads from:
    1. {config_dir}/base.yaml (base configuration)
    2. {config_dir}/{env}.yaml (environment-specific overrides)
    3. Environment variables (highest priority)
    """
    import os

    merged = merge_configs(
        load_yaml_config(config_dir / "base.yaml"),
        load_yaml_config(config_dir / f"{env}.yaml"),
    )

    flat_config: dict = {}
    if "app" in merged:
        flat_config["app_name"] = merged["app"].get("name", "usEskimi Adapter")
        flat_config["app_version"] = merged["app"].get("version", "0.1.0")

    flat_config["env"] = env

    # pydantic-settings gives init kwargs higher priority than env vars,
    # so env-var overrides are merged into the YAML dict first.
    for section_key, settings_cls in _SECTION_CLASSES.items():
        section_data = dict(merged.get(section_key, {}))

        # USESKIMI_SECTION__FIELD → field
        prefix = f"USESKIMI_{section_key.upper()}__"
        for env_key, env_value in os.environ.items():
            if env_key.startswith(prefix):
                field_name = env_key[len(prefix):].lower()
                section_data[field_name] = env_value

        flat_config[section_key] = settings_cls(**section_data)

    return Settings(**flat_config)


@lru_cache
def get_settings() -> Settings:
    """Get application settings for the environment named by ``USESKIMI_ENV``."""
    import os

    return load_settings(os.getenv("USESKIMI_ENV", "dev"))
