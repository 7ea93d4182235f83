"""Configuration management for the battlenet-oauth CLI.

Loads credentials from .env and optional region host overrides from
config/regions.yaml. The library functions in ``battlenet_oauth.auth`` take
everything as arguments and never read this module.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from battlenet_oauth.auth import CredentialStrategy


class Settings(BaseModel):
    """Application settings loaded from environment variables."""
    client_id: str = Field(default="", description="Battle.net OAuth client ID")
    client_secret: str = Field(default="", description="Battle.net OAuth client secret")
    region: str = Field(default="us", description="Default region code")
    strategy: CredentialStrategy = Field(
        default=CredentialStrategy.QUERY,
        description="How credentials are sent to the token endpoint",
    )
    regions_file: str = Field(default="", description="Path to a YAML file of region host overrides")


class Config(BaseModel):
    """Full application configuration."""
    settings: Settings
    region_hosts: dict[str, str] = Field(default_factory=dict)


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (where config/ or .env lives)."""
    current = Path(__file__).resolve().parent
    for parent in [current, *current.parents]:
        if (parent / "config" / "regions.yaml").exists() or (parent / ".env").exists():
            return parent
    # Fallback: cwd
    return Path.cwd()


def _load_region_hosts(path: Path) -> dict[str, str]:
    """Load region host overrides from a YAML file of the form ``regions: {code: host}``."""
    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return {str(code).lower(): str(host) for code, host in (data.get("regions") or {}).items()}


def _env(*keys: str, default: str = "") -> str:
    """Try multiple env var names, return the first one found."""
    for key in keys:
        val = os.environ.get(key, "")
        if val:
            return val.strip().strip('"')
    return default


def _load_settings() -> Settings:
    """Load settings from environment variables.

    Supports both BATTLENET_* and bare CLIENT_ID/CLIENT_SECRET names from .env.
    """
    return Settings(
        client_id=_env("BATTLENET_CLIENT_ID", "CLIENT_ID"),
        client_secret=_env("BATTLENET_CLIENT_SECRET", "CLIENT_SECRET"),
        region=_env("BATTLENET_REGION", default="us"),
        strategy=CredentialStrategy(_env("BATTLENET_STRATEGY", default="query").lower()),
        regions_file=_env("BATTLENET_REGIONS_FILE"),
    )


def load_config(project_root: Path) -> Config:
    """Build the configuration for a given project root."""
    env_path = project_root / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    settings = _load_settings()

    if settings.regions_file:
        regions_path = Path(settings.regions_file)
        if not regions_path.exists():
            raise FileNotFoundError(f"Regions file not found at {regions_path}")
    else:
        regions_path = project_root / "config" / "regions.yaml"

    region_hosts = _load_region_hosts(regions_path) if regions_path.exists() else {}
    return Config(settings=settings, region_hosts=region_hosts)


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Load and cache the full application configuration."""
    return load_config(_find_project_root())
