"""YAML config loading: accepted deep-link patterns plus runtime settings."""

from __future__ import annotations

from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from deferred_link.settings import Settings

DEFAULT_CONFIG_PATH = "deferred_links.yaml"


class AppConfig(BaseModel):
    deep_links: list[str] = []
    settings: Settings = Field(default_factory=Settings)


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> AppConfig:
    """Load config from YAML file; settings not set there come from the environment."""
    load_dotenv()

    data: dict = {}
    path = Path(config_path)
    if path.exists():
        with open(path) as f:
            data = yaml.safe_load(f) or {}

    # Built directly so env vars fill the fields the file leaves out
    settings = Settings(**(data.pop("settings", None) or {}))
    return AppConfig(**data, settings=settings)
