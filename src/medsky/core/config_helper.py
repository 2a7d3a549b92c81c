"""
Config Helper - Provides unified config access for MedSky.
"""

from medsky.core.config import get_config

config = get_config()

__all__ = ["config"]
