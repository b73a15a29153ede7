"""Application settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Upstream SCIM API
    upstream_timeout: float = 30
    upstream_max_connections: int = 100

    # Service
    service_host: str = "0.0.0.0"
    service_port: int = 8000
    service_workers: int = 1

    # Plugin configuration applied at startup (YAML), optional
    plugin_config_path: Optional[str] = None

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# Global settings instance
settings = Settings()
