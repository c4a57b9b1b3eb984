from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """
    URL store settings loaded from environment variables.
    
    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """
    
    # Database
    # A filesystem path, ":memory:" or any SQLAlchemy database URL
    database_url: str = "sqlite:///./url_store.db"
    database_echo: bool = False  # Echo SQL statements (debugging only)
    
    # Logging (applied by url_store.logging_config.setup_logging)
    log_level: str = "INFO"
    log_file: Optional[str] = None
    log_json: bool = False  # One JSON object per line instead of plain text
    
    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create settings instance
settings = Settings()
