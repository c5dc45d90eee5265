"""
Application configuration settings
"""

from pydantic_settings import BaseSettings
from pydantic import computed_field
from functools import lru_cache
from typing import List, Optional
from urllib.parse import quote_plus


class Settings(BaseSettings):
    # Database Configuration
    # db_url wins when set (e.g. "sqlite://" for local runs and tests)
    db_url: Optional[str] = None
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "skip2love"
    db_user: str = "postgres"
    db_password: str = "postgres"
    db_driver: str = "postgresql"

    @computed_field
    @property
    def database_url(self) -> str:
        """Compile database URL from individual parameters"""
        if self.db_url:
            return self.db_url
        encoded_user = quote_plus(self.db_user)
        encoded_password = quote_plus(self.db_password)
        return f"{self.db_driver}://{encoded_user}:{encoded_password}@{self.db_host}:{self.db_port}/{self.db_name}"

    # Security (secret_key is required from environment)
    secret_key: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 7
    bcrypt_rounds: int = 12

    # Application
    app_name: str = "Skip2Love API"
    debug: bool = False
    api_prefix: str = "/api"

    # CORS - comma-separated list
    allowed_origins: str = "http://localhost:5173"

    # Logging Configuration
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_to_file: bool = False
    log_file_path: str = "logs/skip2love.log"
    log_max_size_mb: int = 10
    log_backup_count: int = 5
    log_to_console: bool = True
    log_verbosity: str = "minimal"  # "minimal" or "full" - minimal only logs errors and important calls

    def get_allowed_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string"""
        return [origin.strip() for origin in self.allowed_origins.split(',') if origin.strip()]

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache()
def get_settings():
    return Settings()


settings = get_settings()
