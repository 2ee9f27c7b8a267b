"""
Configuration loader for the Plasso client.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "plasso_config.yml"


class PlassoConfig(BaseModel):
    """Endpoints and timeouts used by the Flexkit and billing clients"""

    domain: str = "https://plasso.com"
    graphql_url: str = "https://api.plasso.com"
    flexkit_timeout_seconds: float = Field(default=5.0, gt=0.0, le=30.0)
    session_timeout_seconds: float = Field(default=1.0, gt=0.0, le=30.0)
    cookie_name: str = Field(default="plasso", min_length=1)


def load_plasso_config(config_path: Optional[Path] = None) -> PlassoConfig:
    """
    Load and validate the Plasso configuration.

    Args:
        config_path: Path to config file. Defaults to config/plasso_config.yml.
            A missing default file falls back to built-in defaults; a missing
            explicit path is an error.

    Returns:
        Validated PlassoConfig object

    Raises:
        FileNotFoundError: If an explicit config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    data = {}
    if config_path is not None and not config_path.exists():
        raise FileNotFoundError(f"Plasso config file not found: {config_path}")

    path = config_path or DEFAULT_CONFIG_PATH
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

    # Environment overrides
    if os.getenv("PLASSO_DOMAIN"):
        data["domain"] = os.environ["PLASSO_DOMAIN"]
    if os.getenv("PLASSO_GRAPHQL_URL"):
        data["graphql_url"] = os.environ["PLASSO_GRAPHQL_URL"]

    try:
        cfg = PlassoConfig(**data)
        if path.exists():
            logger.info("Successfully loaded Plasso config from %s", path)
        else:
            logger.info("No Plasso config at %s; using built-in defaults", path)
        return cfg
    except ValidationError as e:
        logger.error("Plasso config validation failed: %s", e)
        raise
