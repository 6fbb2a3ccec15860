"""Supabase implementation for the ingredient catalog."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from ava_health.domain.ingredients import IngredientRecord
from ava_health.services.catalog import CatalogRepository


@dataclass
class SupabaseCatalogRepository(CatalogRepository):
    """Supabase-backed repository for catalog ingredients."""

    client: Client

    def list_ingredients(self) -> list[IngredientRecord]:
        """Return every catalog entry ordered by name."""
        response = self.client.table("ingredients").select("*").order("name").execute()
        return [parse_ingredient(row) for row in response.data or []]

    def search_ingredients(self, query: str) -> list[IngredientRecord]:
        """Return entries whose name or any alias contains the query, ignoring case."""
        name_response = (
            self.client.table("ingredients")
            .select("*")
            .ilike("name", f"%{_escape_like(query)}%")
            .execute()
        )
        records = [parse_ingredient(row) for row in name_response.data or []]

        # Array filters match whole elements only; alias substrings are checked here.
        alias_response = self.client.table("ingredients").select("*").execute()
        seen = {record.id for record in records}
        needle = query.lower()
        for row in alias_response.data or []:
            record = parse_ingredient(row)
            if record.id in seen:
                continue
            if any(needle in alias.lower() for alias in record.aliases):
                seen.add(record.id)
                records.append(record)
        return records

    def insert_ingredient(self, payload: dict[str, object]) -> IngredientRecord:
        """Create a catalog entry and return it."""
        response = self.client.table("ingredients").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create ingredient")
        return parse_ingredient(response.data[0])


def parse_ingredient(row: dict[str, object]) -> IngredientRecord:
    """Parse an ingredient row into a domain model."""
    return IngredientRecord(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        aliases=tuple(str(alias) for alias in row.get("aliases") or []),
        category=str(row.get("category", "")),
        health_rating=int(row.get("health_rating", 0)),
        risk_factors=tuple(str(tag) for tag in row.get("risk_factors") or []),
        description=str(row.get("description", "")),
    )


def _escape_like(query: str) -> str:
    """Escape LIKE wildcards so the query matches literally."""
    return query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
