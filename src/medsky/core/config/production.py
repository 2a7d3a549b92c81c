"""Production configuration."""

from .base import BaseConfig


class ProductionConfig(BaseConfig):
    """Production configuration."""
    
    DEBUG: bool = False
    LOG_LEVEL: str = "WARNING"
    
    PROVIDER_SIGNIN_ENABLED: bool = False
