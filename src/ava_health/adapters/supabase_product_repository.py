"""Supabase implementation for scanned products."""

import logging
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from ava_health.adapters.supabase_catalog_repository import parse_ingredient
from ava_health.domain.ingredients import IngredientRecord
from ava_health.domain.products import ProductInfo, ProductRecord
from ava_health.services.scan import ProductRepository

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseProductRepository(ProductRepository):
    """Supabase-backed repository for products and their ingredient links."""

    client: Client

    def create_product(
        self, info: ProductInfo, ingredients: list[IngredientRecord]
    ) -> ProductRecord:
        """Insert a product and its join rows; remove the product if linking fails."""
        response = (
            self.client.table("products")
            .insert(
                {
                    "name": info.name,
                    "category": info.category,
                    "barcode": info.barcode,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create product")
        row = response.data[0]
        product_id = UUID(str(row["id"]))

        if ingredients:
            try:
                self.client.table("product_ingredients").insert(
                    [
                        {
                            "product_id": str(product_id),
                            "ingredient_id": str(ingredient.id),
                            "position": position,
                        }
                        for position, ingredient in enumerate(ingredients)
                    ]
                ).execute()
            except Exception:
                _logger.warning(
                    "Rolling back product %s after link failure", product_id
                )
                self.client.table("products").delete().eq(
                    "id", str(product_id)
                ).execute()
                raise

        return _parse_product(row, ingredients)

    def get_product(self, product_id: UUID) -> ProductRecord | None:
        """Return a product with its ingredients in saved order."""
        response = (
            self.client.table("products")
            .select("*")
            .eq("id", str(product_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None

        links_response = (
            self.client.table("product_ingredients")
            .select("ingredient_id, position")
            .eq("product_id", str(product_id))
            .order("position")
            .execute()
        )
        links = links_response.data or []
        ingredients: list[IngredientRecord] = []
        if links:
            ids = list({str(link["ingredient_id"]) for link in links})
            ingredients_response = (
                self.client.table("ingredients").select("*").in_("id", ids).execute()
            )
            by_id = {
                str(item["id"]): parse_ingredient(item)
                for item in ingredients_response.data or []
            }
            ingredients = [
                by_id[str(link["ingredient_id"])]
                for link in links
                if str(link["ingredient_id"]) in by_id
            ]
        return _parse_product(response.data[0], ingredients)


def _parse_product(
    row: dict[str, object], ingredients: list[IngredientRecord]
) -> ProductRecord:
    created_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else None
    )
    return ProductRecord(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        category=str(row.get("category", "")),
        barcode=row.get("barcode"),
        ingredients=list(ingredients),
        created_at=created_at,
    )
