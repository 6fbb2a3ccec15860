"""Domain models for scanned products and scan results."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from ava_health.domain.ingredients import AnalyzedIngredient, IngredientRecord


@dataclass(frozen=True)
class ProductInfo:
    """Product metadata supplied with a scan."""

    name: str | None = None
    category: str | None = None
    barcode: str | None = None

    @property
    def is_complete(self) -> bool:
        """Return True when the product can be saved."""
        return bool(self.name and self.name.strip()) and bool(
            self.category and self.category.strip()
        )


@dataclass(frozen=True)
class ProductRecord:
    """Persisted product with its linked catalog ingredients."""

    id: UUID
    name: str
    category: str
    barcode: str | None
    ingredients: list[IngredientRecord]
    created_at: datetime | None = None


@dataclass(frozen=True)
class ScanResult:
    """Annotated ingredients for one scan, plus the saved product if any."""

    ingredients: list[AnalyzedIngredient]
    product: ProductRecord | None = None
