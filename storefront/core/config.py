"""Storefront Configuration"""

import os
from typing import Optional
from pydantic_settings import BaseSettings
from functools import lru_cache

DEFAULT_CATALOG_PATH = os.path.join(os.path.dirname(__file__), "..", "data", "products.json")


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "Storefront"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 4004
    log_level: Optional[str] = None

    # Catalog data and static assets
    catalog_path: str = DEFAULT_CATALOG_PATH
    public_dir: str = "./public"

    # Simulated network instability
    request_timeout: float = 6.0
    latency_enabled: bool = True

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    @property
    def resolved_log_level(self) -> str:
        """Explicit log level, falling back to DEBUG/INFO by debug flag"""
        if self.log_level:
            return self.log_level.upper()
        return "DEBUG" if self.debug else "INFO"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
