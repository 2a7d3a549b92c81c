"""Configuration management for MedSky.

The active configuration is chosen by the ``MEDSKY_ENV`` environment variable
(``development``, ``testing`` or ``production``; defaults to ``development``).
"""

import os
from functools import lru_cache

from .base import BaseConfig
from .development import DevelopmentConfig
from .testing import TestingConfig
from .production import ProductionConfig

_CONFIGS = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


@lru_cache(maxsize=1)
def get_config() -> BaseConfig:
    """Return the configuration for the current ``MEDSKY_ENV``."""
    env = os.getenv("MEDSKY_ENV", "development").lower()
    if env not in _CONFIGS:
        raise ValueError(
            f"Unknown MEDSKY_ENV '{env}'; expected one of {sorted(_CONFIGS)}"
        )
    return _CONFIGS[env]()


__all__ = [
    "get_config",
    "BaseConfig",
    "DevelopmentConfig",
    "TestingConfig",
    "ProductionConfig",
]
