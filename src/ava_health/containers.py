"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from ava_health.adapters.google_vision_client import HttpxGoogleVisionClient
from ava_health.adapters.mistral_ocr_client import HttpxMistralOcrClient
from ava_health.adapters.openai_response_generator import OpenAIResponseGenerator
from ava_health.adapters.static_text_extractor import StaticTextExtractor
from ava_health.adapters.supabase_catalog_repository import SupabaseCatalogRepository
from ava_health.adapters.supabase_product_repository import (
    SupabaseProductRepository,
)
from ava_health.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from ava_health.config import Settings, parse_ocr_provider
from ava_health.services.assistant import AssistantService
from ava_health.services.cache import InMemoryCache
from ava_health.services.catalog import IngredientCatalog
from ava_health.services.ocr import OcrService, TextExtractor
from ava_health.services.profiles import ProfileService
from ava_health.services.scan import ScanService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: IngredientCatalog
    scan_service: ScanService
    profile_service: ProfileService
    ocr_service: OcrService
    assistant_service: AssistantService
    close_resources: Callable[[], Awaitable[None]]


def build_text_extractor(settings: Settings) -> TextExtractor:
    """Select the OCR provider named in settings."""
    provider = parse_ocr_provider(settings.ocr_provider)
    if provider == "mock":
        return StaticTextExtractor()
    if provider == "google":
        if not settings.google_api_key:
            raise ValueError("GOOGLE_API_KEY is required for the google OCR provider")
        return HttpxGoogleVisionClient.create(
            api_key=settings.google_api_key, url=settings.google_vision_url
        )
    if not settings.mistral_api_key:
        raise ValueError("MISTRAL_API_KEY is required for the mistral OCR provider")
    return HttpxMistralOcrClient.create(
        api_key=settings.mistral_api_key, base_url=settings.mistral_base_url
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    catalog_repository = SupabaseCatalogRepository(supabase_client)
    product_repository = SupabaseProductRepository(supabase_client)
    profile_repository = SupabaseProfileRepository(supabase_client)
    catalog = IngredientCatalog(
        repository=catalog_repository,
        cache=InMemoryCache(),
        snapshot_ttl_seconds=resolved_settings.catalog_cache_ttl_seconds,
    )
    scan_service = ScanService(catalog=catalog, product_repository=product_repository)
    profile_service = ProfileService(profile_repository)
    text_extractor = build_text_extractor(resolved_settings)
    ocr_service = OcrService(text_extractor)
    generator = OpenAIResponseGenerator.create(
        api_key=resolved_settings.openai_api_key,
        model=resolved_settings.openai_model,
    )
    assistant_service = AssistantService(
        generator=generator, product_repository=product_repository
    )

    async def close_resources() -> None:
        if isinstance(text_extractor, HttpxMistralOcrClient | HttpxGoogleVisionClient):
            await text_extractor.close()
        await generator.client.close()

    return AppContainer(
        settings=resolved_settings,
        catalog=catalog,
        scan_service=scan_service,
        profile_service=profile_service,
        ocr_service=ocr_service,
        assistant_service=assistant_service,
        close_resources=close_resources,
    )
