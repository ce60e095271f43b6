"""Storefront client configuration"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class StorefrontSettings(BaseSettings):
    """Storefront settings loaded from ``FOODORDER_*`` environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="FOODORDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API
    api_base_url: str = "http://localhost:8000"
    timeout: float = 10.0

    # Cart persistence
    cart_dir: str = "~/.foodorder"
    cart_slot: str = "cart"

    # Acting user, as stamped by the login flow
    user_id: str | None = None
    user_role: str = "customer"


@lru_cache
def get_settings() -> StorefrontSettings:
    """Get cached settings instance"""
    return StorefrontSettings()
