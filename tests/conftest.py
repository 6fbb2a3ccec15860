"""Shared test fixtures."""

from dataclasses import dataclass, field
from uuid import UUID, uuid4

import pytest

from ava_health.catalog_seed import SEED_INGREDIENTS
from ava_health.config import Settings
from ava_health.containers import AppContainer
from ava_health.domain.ingredients import IngredientRecord
from ava_health.domain.products import ProductInfo, ProductRecord
from ava_health.domain.profiles import UserHealthProfile
from ava_health.services.assistant import AssistantService, ResponseGenerator
from ava_health.services.cache import InMemoryCache
from ava_health.services.catalog import CatalogRepository, IngredientCatalog
from ava_health.services.ocr import OcrService, TextExtractor
from ava_health.services.profiles import ProfileRepository, ProfileService
from ava_health.services.scan import ProductRepository, ScanService

DEMO_PROFILE = UserHealthProfile(
    allergies=("Fragrance", "Parabens"),
    dietary_preferences=("Vegan",),
    skin_conditions=("Sensitive Skin", "Eczema"),
)


def make_ingredient(  # noqa: PLR0913
    name: str,
    *,
    aliases: tuple[str, ...] = (),
    category: str = "Test",
    health_rating: int = 8,
    risk_factors: tuple[str, ...] = (),
    description: str = "",
) -> IngredientRecord:
    return IngredientRecord(
        id=uuid4(),
        name=name,
        aliases=aliases,
        category=category,
        health_rating=health_rating,
        risk_factors=risk_factors,
        description=description,
    )


def seed_records() -> list[IngredientRecord]:
    return [
        make_ingredient(
            str(payload["name"]),
            aliases=tuple(payload["aliases"]),
            category=str(payload["category"]),
            health_rating=int(payload["health_rating"]),
            risk_factors=tuple(payload["risk_factors"]),
            description=str(payload["description"]),
        )
        for payload in SEED_INGREDIENTS
    ]


@dataclass
class InMemoryCatalogRepository(CatalogRepository):
    """In-memory catalog repository for tests."""

    records: list[IngredientRecord] = field(default_factory=seed_records)
    list_calls: int = 0
    fail: bool = False

    def list_ingredients(self) -> list[IngredientRecord]:
        self.list_calls += 1
        if self.fail:
            raise RuntimeError("catalog unavailable")
        return list(self.records)

    def search_ingredients(self, query: str) -> list[IngredientRecord]:
        query_lower = query.lower()
        return [
            record
            for record in self.records
            if any(query_lower in name.lower() for name in record.all_names())
        ]

    def insert_ingredient(self, payload: dict[str, object]) -> IngredientRecord:
        record = make_ingredient(
            str(payload["name"]),
            aliases=tuple(payload.get("aliases", [])),
            category=str(payload.get("category", "")),
            health_rating=int(payload.get("health_rating", 0)),
            risk_factors=tuple(payload.get("risk_factors", [])),
            description=str(payload.get("description", "")),
        )
        self.records.append(record)
        return record


@dataclass
class InMemoryProductRepository(ProductRepository):
    """In-memory product repository for tests."""

    products: dict[UUID, ProductRecord] = field(default_factory=dict)
    fail: bool = False

    def create_product(
        self, info: ProductInfo, ingredients: list[IngredientRecord]
    ) -> ProductRecord:
        if self.fail:
            raise RuntimeError("storage unavailable")
        product = ProductRecord(
            id=uuid4(),
            name=str(info.name),
            category=str(info.category),
            barcode=info.barcode,
            ingredients=list(ingredients),
        )
        self.products[product.id] = product
        return product

    def get_product(self, product_id: UUID) -> ProductRecord | None:
        return self.products.get(product_id)


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[UUID, UserHealthProfile] = field(default_factory=dict)

    def get_profile(self, user_id: UUID) -> UserHealthProfile | None:
        return self.profiles.get(user_id)

    def update_profile(
        self, user_id: UUID, changes: dict[str, list[str]]
    ) -> UserHealthProfile:
        current = self.profiles[user_id]
        updated = UserHealthProfile(
            allergies=tuple(changes.get("allergies", current.allergies)),
            dietary_preferences=tuple(
                changes.get("dietary_preferences", current.dietary_preferences)
            ),
            skin_conditions=tuple(
                changes.get("skin_conditions", current.skin_conditions)
            ),
        )
        self.profiles[user_id] = updated
        return updated


@dataclass
class FakeTextExtractor(TextExtractor):
    """Fake OCR provider returning fixed text."""

    text: str = "Ingredients: Water, Glycerin, Fragrance. Made in France"
    seen: list[str] = field(default_factory=list)

    async def extract_text(self, image_base64: str) -> str:
        self.seen.append(image_base64)
        return self.text


@dataclass
class FakeResponseGenerator(ResponseGenerator):
    """Fake LLM that records prompts."""

    reply: str = "Patch test first."
    error: Exception | None = None
    prompts: list[tuple[str, str]] = field(default_factory=list)

    async def generate(self, prompt: str, system_prompt: str) -> str:
        self.prompts.append((prompt, system_prompt))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=(
            "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
            "eyJyb2xlIjoic2VydmljZV9yb2xlIn0."
            "c2lnbmF0dXJl"
        ),
        admin_token="admin-token",
        openai_api_key="openai-key",
        ocr_provider="mock",
    )


@pytest.fixture
def catalog_repository() -> InMemoryCatalogRepository:
    return InMemoryCatalogRepository()


@pytest.fixture
def product_repository() -> InMemoryProductRepository:
    return InMemoryProductRepository()


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def text_extractor() -> FakeTextExtractor:
    return FakeTextExtractor()


@pytest.fixture
def response_generator() -> FakeResponseGenerator:
    return FakeResponseGenerator()


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    catalog_repository: InMemoryCatalogRepository,
    product_repository: InMemoryProductRepository,
    profile_repository: InMemoryProfileRepository,
    text_extractor: FakeTextExtractor,
    response_generator: FakeResponseGenerator,
) -> AppContainer:
    catalog = IngredientCatalog(repository=catalog_repository, cache=InMemoryCache())

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        catalog=catalog,
        scan_service=ScanService(
            catalog=catalog, product_repository=product_repository
        ),
        profile_service=ProfileService(profile_repository),
        ocr_service=OcrService(text_extractor),
        assistant_service=AssistantService(
            generator=response_generator, product_repository=product_repository
        ),
        close_resources=close_resources,
    )
