"""Domain models for the ingredient catalog and scan annotations."""

from collections.abc import Iterator
from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class IngredientRecord:
    """Reference catalog entry for a known ingredient."""

    id: UUID
    name: str
    aliases: tuple[str, ...]
    category: str
    health_rating: int
    risk_factors: tuple[str, ...]
    description: str

    def all_names(self) -> Iterator[str]:
        """Yield the canonical name followed by every alias."""
        yield self.name
        yield from self.aliases


@dataclass(frozen=True)
class AnalyzedIngredient:
    """Ingredient paired with a risk verdict for one profile."""

    ingredient: IngredientRecord
    is_risky: bool
    risk_reasons: tuple[str, ...] = ()
