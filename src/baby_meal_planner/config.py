"""Configuration management - settings from env, reference data from YAML."""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=8000, description="Bind port")
    log_level: str = Field(default="INFO", description="Root log level")

    # Baby
    baby_name: str = Field(default="Leo", description="Child's display name")
    baby_age_months: int = Field(default=7, ge=0, description="Child's age in months at startup")

    # Reference data
    config_dir: Path | None = Field(default=None, description="Override directory for YAML reference data")
    default_image_url: str = Field(
        default="https://images.unsplash.com/photo-1498837167922-ddd27525d352?auto=format&fit=crop&q=80&w=400",
        description="Image used for user recipes submitted without one",
    )


def load_yaml_config(config_path: Path) -> dict[str, Any]:
    """Load YAML config file."""
    if not config_path.exists():
        return {}
    with config_path.open(encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()


def _config_dir(config_dir_str: str) -> Path:
    if not config_dir_str:
        return Path(__file__).parent.parent.parent / "config"
    return Path(config_dir_str)


@lru_cache
def get_recipe_data(config_dir_str: str = "") -> dict[str, Any]:
    """Seed recipes and seed plan assignments."""
    return load_yaml_config(_config_dir(config_dir_str) / "recipes.yaml")


@lru_cache
def get_guidance_data(config_dir_str: str = "") -> dict[str, Any]:
    """Development stages, milestones, ingredient guides, default meal times."""
    return load_yaml_config(_config_dir(config_dir_str) / "guidance.yaml")
