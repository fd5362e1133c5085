"""
Configuration loader for the catalog admin client
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "catalog_config.yml"


class ApiConfig(BaseModel):
    """Products backend configuration"""

    base_url: str = "http://localhost:5000"
    products_path: str = "/products"
    timeout_seconds: float = Field(default=10.0, gt=0.0, le=300.0)
    use_mock: bool = False


class GuardConfig(BaseModel):
    """Route guard configuration"""

    login_path: str = "/login"


class LoggingConfig(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class CatalogConfig(BaseModel):
    api: ApiConfig = Field(default_factory=ApiConfig)
    guard: GuardConfig = Field(default_factory=GuardConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    api = dict(data.get("api") or {})
    if os.getenv("CATALOG_API_URL"):
        api["base_url"] = os.environ["CATALOG_API_URL"]
    if os.getenv("CATALOG_API_TIMEOUT"):
        api["timeout_seconds"] = os.environ["CATALOG_API_TIMEOUT"]
    if os.getenv("CATALOG_USE_MOCK"):
        api["use_mock"] = os.environ["CATALOG_USE_MOCK"].lower() in ("1", "true", "yes")
    if api:
        data = {**data, "api": api}
    return data


def load_catalog_config(config_path: Optional[Path] = None) -> CatalogConfig:
    """
    Load and validate catalog configuration from YAML file

    Args:
        config_path: Path to config file. Defaults to config/catalog_config.yml;
            when the default file is absent, model defaults are used.

    Returns:
        Validated CatalogConfig object, with environment overrides applied

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    load_dotenv()

    data: Dict[str, Any] = {}
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
        if not config_path.exists():
            logger.info("No config file at %s, using defaults", config_path)
            config_path = None
    elif not config_path.exists():
        raise FileNotFoundError(f"Catalog config file not found: {config_path}")

    if config_path is not None:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

    try:
        cfg = CatalogConfig(**_apply_env_overrides(data))
        if config_path is not None:
            logger.info("Successfully loaded catalog config from %s", config_path)
        return cfg
    except ValidationError as e:
        logger.error("Catalog config validation failed: %s", e)
        raise
