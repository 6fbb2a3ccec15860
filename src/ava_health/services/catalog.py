"""Ingredient catalog lookup."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from ava_health.domain.ingredients import IngredientRecord
from ava_health.services.cache import Cache

_SNAPSHOT_KEY = "catalog:snapshot"

_logger = logging.getLogger(__name__)


class CatalogRepository(Protocol):
    """Persistence interface for the reference ingredient catalog."""

    def list_ingredients(self) -> list[IngredientRecord]:
        """Return every catalog entry."""

    def search_ingredients(self, query: str) -> list[IngredientRecord]:
        """Return entries whose name or alias contains the query."""

    def insert_ingredient(self, payload: dict[str, object]) -> IngredientRecord:
        """Create a catalog entry. Only used by seeding tooling."""


@dataclass
class IngredientCatalog:
    """Read-side service over the catalog with a cached snapshot."""

    repository: CatalogRepository
    cache: Cache
    snapshot_ttl_seconds: int = 300

    def snapshot(self) -> list[IngredientRecord]:
        """Return the full catalog, served from cache when fresh."""
        cached = self.cache.get(_SNAPSHOT_KEY)
        if isinstance(cached, tuple):
            return list(cached)
        records = tuple(self.repository.list_ingredients())
        self.cache.set(_SNAPSHOT_KEY, records, ttl_seconds=self.snapshot_ttl_seconds)
        return list(records)

    def invalidate(self) -> None:
        """Drop the cached snapshot after a catalog write."""
        self.cache.delete(_SNAPSHOT_KEY)
        _logger.info("Catalog snapshot invalidated")

    def match(self, tokens: Sequence[str]) -> list[IngredientRecord]:
        """Match tokens against the current catalog snapshot."""
        return match_tokens(tokens, self.snapshot())

    def search(self, query: str) -> list[IngredientRecord]:
        """Search the catalog store by name or alias."""
        return self.repository.search_ingredients(query)


def match_tokens(
    tokens: Sequence[str], catalog: Sequence[IngredientRecord]
) -> list[IngredientRecord]:
    """Resolve each token to at most one catalog record, in token order.

    A record is a candidate when one of its names contains the token or is
    contained in it, ignoring case. The candidate with the longest overlap
    wins, so "Salicylic Acid Extract" resolves to "Salicylic Acid" rather
    than "Acid". Tokens without a candidate are dropped.
    """
    matched: list[IngredientRecord] = []
    for token in tokens:
        best = _best_match(token, catalog)
        if best is not None:
            matched.append(best)
    return matched


def _best_match(
    token: str, catalog: Sequence[IngredientRecord]
) -> IngredientRecord | None:
    token_lower = token.lower()
    if not token_lower:
        return None
    best: IngredientRecord | None = None
    best_key: tuple[int, int] | None = None
    for record in catalog:
        for name in record.all_names():
            key = _overlap_key(token_lower, name.lower())
            # strict comparison keeps the earliest catalog entry on ties
            if key is not None and (best_key is None or key > best_key):
                best, best_key = record, key
    return best


def _overlap_key(token: str, name: str) -> tuple[int, int] | None:
    """Rank a name against a token, or None when neither contains the other."""
    if not name:
        return None
    if name in token or token in name:
        overlap = min(len(name), len(token))
        return overlap, -abs(len(name) - len(token))
    return None
