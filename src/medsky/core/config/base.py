"""Base configuration for the MedSky application."""

import os
from pathlib import Path
from typing import List, Optional
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Load environment variables from .env in the project root when present
PROJECT_ROOT = Path(__file__).resolve().parents[4]
dotenv_path = PROJECT_ROOT / '.env'
if dotenv_path.exists():
    load_dotenv(dotenv_path=str(dotenv_path))


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""
    
    # Application settings
    APP_NAME: str = "MedSky"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    
    # PubMed (NCBI E-utilities) settings
    PUBMED_API_URL: str = "https://eutils.ncbi.nlm.nih.gov/entrez/eutils"
    PUBMED_API_KEY: Optional[str] = os.getenv("PUBMED_API_KEY")
    PUBMED_TIMEOUT_SECONDS: float = 10.0
    LOOKUP_TIMEOUT_SECONDS: float = 15.0
    CONDITION_SEARCH_RETMAX: int = 5
    
    # Paths
    BASE_DIR: Path = PROJECT_ROOT
    DATA_DIR: Path = BASE_DIR / "data"
    LOGS_DIR: Path = BASE_DIR / "logs"
    
    # Persistence settings
    USE_DATABASE: bool = True
    DATABASE_URL: str = f"sqlite:///{PROJECT_ROOT / 'data' / 'medsky.db'}"
    
    # Logging
    LOG_LEVEL: str = "INFO"
    FILE_LOGGING: bool = True
    
    # Federated sign-in without token verification (development stand-in)
    PROVIDER_SIGNIN_ENABLED: bool = True
    
    # CORS
    CORS_ORIGINS: List[str] = ["*"]
    
    class Config:
        """Pydantic configuration."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "allow"
        
    def __init__(self, **kwargs):
        """Initialize configuration and create required directories."""
        super().__init__(**kwargs)
        self._create_directories()
        
    def _create_directories(self) -> None:
        """Create required directories if they don't exist."""
        directories = [self.DATA_DIR]
        if self.FILE_LOGGING:
            directories.append(self.LOGS_DIR)
        for directory in directories:
            directory.mkdir(parents=True, exist_ok=True)
    
    @property
    def database_url(self) -> Optional[str]:
        """Database URL, or None when records are kept in memory."""
        if not self.USE_DATABASE:
            return None
        return self.DATABASE_URL
