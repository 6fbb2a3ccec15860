"""Conversions from domain models to API responses."""

from ava_health.api.models import (
    IngredientResponse,
    ProductResponse,
    ProfileResponse,
    ScanResponse,
)
from ava_health.domain.ingredients import AnalyzedIngredient, IngredientRecord
from ava_health.domain.products import ProductRecord, ScanResult
from ava_health.domain.profiles import UserHealthProfile


def ingredient_response(
    record: IngredientRecord, analyzed: AnalyzedIngredient | None = None
) -> IngredientResponse:
    """Serialize a catalog record, with its verdict when one was computed."""
    return IngredientResponse(
        id=record.id,
        name=record.name,
        aliases=list(record.aliases),
        category=record.category,
        health_rating=record.health_rating,
        risk_factors=list(record.risk_factors),
        description=record.description,
        is_risky=analyzed.is_risky if analyzed else None,
        risk_reasons=list(analyzed.risk_reasons) if analyzed else [],
    )


def product_response(product: ProductRecord) -> ProductResponse:
    return ProductResponse(
        id=product.id,
        name=product.name,
        category=product.category,
        barcode=product.barcode,
        ingredient_ids=[ingredient.id for ingredient in product.ingredients],
    )


def scan_response(
    result: ScanResult, extracted_text: str | None = None
) -> ScanResponse:
    """Serialize a scan, keeping ingredient order."""
    return ScanResponse(
        ingredients=[
            ingredient_response(item.ingredient, item) for item in result.ingredients
        ],
        product=product_response(result.product) if result.product else None,
        extracted_text=extracted_text,
    )


def profile_response(profile: UserHealthProfile) -> ProfileResponse:
    return ProfileResponse(
        allergies=list(profile.allergies),
        dietary_preferences=list(profile.dietary_preferences),
        skin_conditions=list(profile.skin_conditions),
    )
