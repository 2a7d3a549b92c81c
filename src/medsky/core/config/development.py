"""Development configuration."""

from .base import BaseConfig, PROJECT_ROOT


class DevelopmentConfig(BaseConfig):
    """Development configuration."""
    
    DEBUG: bool = True
    LOG_LEVEL: str = "DEBUG"
    
    DATABASE_URL: str = f"sqlite:///{PROJECT_ROOT / 'data' / 'medsky_dev.db'}"
