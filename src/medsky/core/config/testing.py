"""Testing configuration."""

from .base import BaseConfig


class TestingConfig(BaseConfig):
    """Testing configuration."""
    
    DEBUG: bool = True
    LOG_LEVEL: str = "DEBUG"
    
    # Keep records in memory and never touch the network or disk logs
    USE_DATABASE: bool = False
    DATABASE_URL: str = "sqlite:///:memory:"
    FILE_LOGGING: bool = False
    PUBMED_API_URL: str = "http://pubmed.invalid/entrez/eutils"
    PUBMED_TIMEOUT_SECONDS: float = 1.0
    LOOKUP_TIMEOUT_SECONDS: float = 2.0
