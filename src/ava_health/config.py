"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

OCR_PROVIDERS = frozenset({"mistral", "google", "mock"})


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    admin_token: str
    openai_api_key: str
    openai_model: str = "gpt-4o-mini"
    ocr_provider: str = "mistral"
    mistral_api_key: str | None = None
    mistral_base_url: str = "https://api.mistral.ai"
    google_api_key: str | None = None
    google_vision_url: str = "https://vision.googleapis.com/v1/images:annotate"
    catalog_cache_ttl_seconds: int = 300
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_ocr_provider(raw: str | None) -> str:
    """Normalize the OCR provider name from env, defaulting to mistral."""
    if raw is None:
        return "mistral"
    cleaned = raw.strip().lower()
    if not cleaned:
        return "mistral"
    if cleaned not in OCR_PROVIDERS:
        raise ValueError(f"Unsupported OCR provider: {raw}")
    return cleaned
