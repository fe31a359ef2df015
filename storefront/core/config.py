"""Storefront Service Configuration"""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "Storefront"
    debug: bool = True
    host: str = "0.0.0.0"
    port: int = 8000

    # Backend REST API (auth, catalog, orders)
    backend_api_url: str = "http://localhost:5000/api"
    backend_timeout: float = 10.0
    backend_token: Optional[str] = None  # Service token for catalog reads

    # Checkout
    shipping_fee: float = Field(default=30000, ge=0)
    currency: str = "VND"
    login_path: str = "/login"
    checkout_path: str = "/checkout"

    # Sessions
    session_max_age_hours: int = 24

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    @property
    def backend_configured(self) -> bool:
        """Check if a backend URL is configured"""
        return bool(self.backend_api_url)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
