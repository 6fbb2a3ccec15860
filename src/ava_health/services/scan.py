"""Scan pipeline: raw label text to a personalized ingredient list."""

import logging
from dataclasses import dataclass, field
from typing import Protocol
from uuid import UUID

from ava_health.domain.ingredients import IngredientRecord
from ava_health.domain.products import ProductInfo, ProductRecord, ScanResult
from ava_health.domain.profiles import UserHealthProfile
from ava_health.services.catalog import IngredientCatalog
from ava_health.services.normalizer import normalize
from ava_health.services.risk import RiskPolicy

_logger = logging.getLogger(__name__)


class ScanValidationError(ValueError):
    """Raised when scan input is rejected before processing."""


class ScanProcessingError(RuntimeError):
    """Raised when a scan fails on a storage dependency."""


class ProductRepository(Protocol):
    """Persistence interface for scanned products."""

    def create_product(
        self, info: ProductInfo, ingredients: list[IngredientRecord]
    ) -> ProductRecord:
        """Insert a product linked to catalog ingredients and return it."""

    def get_product(self, product_id: UUID) -> ProductRecord | None:
        """Return a product with its ingredients, if present."""


@dataclass
class ScanService:
    """Compose normalization, catalog lookup and risk evaluation."""

    catalog: IngredientCatalog
    product_repository: ProductRepository
    risk_policy: RiskPolicy = field(default_factory=RiskPolicy)

    def scan(
        self,
        raw_text: str,
        profile: UserHealthProfile,
        product_info: ProductInfo | None = None,
    ) -> ScanResult:
        """Analyze raw ingredient text for a profile.

        A product is saved only when ``product_info`` carries both a name and
        a category; every save inserts a new product. Storage failures abort
        the whole scan with ScanProcessingError.
        """
        if not isinstance(raw_text, str):
            raise ScanValidationError("Ingredient text must be a string")

        tokens = normalize(raw_text)
        try:
            records = self.catalog.match(tokens)
            product = None
            if product_info is not None and product_info.is_complete:
                product = self.product_repository.create_product(product_info, records)
                _logger.info(
                    "Saved product %s with %s ingredients", product.id, len(records)
                )
        except Exception as exc:
            _logger.exception("Scan failed on a storage dependency")
            raise ScanProcessingError("Failed to process scan") from exc

        ingredients = self.risk_policy.annotate(records, profile)
        return ScanResult(ingredients=ingredients, product=product)
