# Standard library imports
import os
from pathlib import Path
from typing import Final, List, Optional

# External package imports
from dotenv import load_dotenv


# .env at the project root; real environment variables take precedence
ENV_PATH = Path(__file__).resolve().parent.parent.parent / ".env"


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """
    
    def __init__(self) -> None:
        # Server Configuration
        self.host: Final[str] = os.getenv("HOST", "127.0.0.1")
        self.port: Final[int] = int(os.getenv("PORT", "3080"))
        self.cors_allow_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
            if origin.strip()
        ]
        
        # Database Configuration
        self.database_file: Final[str] = os.getenv("DATABASE_FILE", "./database.sqlite")
        self.seed_user_count: Final[int] = int(os.getenv("SEED_USER_COUNT", "20"))
        
        # Password hashing
        self.bcrypt_rounds: Final[int] = int(os.getenv("BCRYPT_ROUNDS", "10"))
        
        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)
    
    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        load_dotenv(ENV_PATH)
        _settings = Settings()
    return _settings
