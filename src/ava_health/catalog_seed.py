"""Reference catalog seed data and seeding entrypoint."""

import logging

from supabase import create_client

from ava_health.adapters.supabase_catalog_repository import SupabaseCatalogRepository
from ava_health.app_logging import configure_logging
from ava_health.config import Settings
from ava_health.domain.ingredients import IngredientRecord
from ava_health.services.catalog import CatalogRepository

_logger = logging.getLogger(__name__)

SEED_INGREDIENTS: list[dict[str, object]] = [
    {
        "name": "Water",
        "aliases": ["Aqua", "H2O"],
        "category": "Solvent",
        "health_rating": 10,
        "risk_factors": [],
        "description": "Universal solvent, completely safe for all uses.",
    },
    {
        "name": "Glycerin",
        "aliases": ["Glycerol"],
        "category": "Humectant",
        "health_rating": 9,
        "risk_factors": [],
        "description": (
            "Natural moisturizing ingredient that helps skin retain moisture."
        ),
    },
    {
        "name": "Phenoxyethanol",
        "aliases": [],
        "category": "Preservative",
        "health_rating": 5,
        "risk_factors": ["skin irritation", "allergic reactions"],
        "description": (
            "Synthetic preservative that can cause irritation in some individuals."
        ),
    },
    {
        "name": "Sodium Lauryl Sulfate",
        "aliases": ["SLS"],
        "category": "Surfactant",
        "health_rating": 3,
        "risk_factors": ["skin irritation", "dryness", "allergic reactions"],
        "description": (
            "Strong cleansing agent that can strip natural oils and irritate skin."
        ),
    },
    {
        "name": "Tocopherol",
        "aliases": ["Vitamin E"],
        "category": "Antioxidant",
        "health_rating": 9,
        "risk_factors": [],
        "description": (
            "Vitamin E derivative that protects skin from free radicals "
            "and oxidative stress."
        ),
    },
    {
        "name": "Fragrance",
        "aliases": ["Parfum", "Aroma"],
        "category": "Fragrance",
        "health_rating": 4,
        "risk_factors": ["allergic reactions", "skin irritation", "hormone disruption"],
        "description": (
            "Mixture of scent chemicals that can cause allergic reactions "
            "and irritation."
        ),
    },
    {
        "name": "Parabens",
        "aliases": ["Methylparaben", "Propylparaben", "Butylparaben", "Ethylparaben"],
        "category": "Preservative",
        "health_rating": 3,
        "risk_factors": ["hormone disruption", "allergic reactions"],
        "description": (
            "Preservatives that may disrupt hormone function and cause "
            "allergic reactions."
        ),
    },
    {
        "name": "Retinol",
        "aliases": ["Vitamin A", "Retinoic Acid"],
        "category": "Anti-aging",
        "health_rating": 7,
        "risk_factors": ["skin irritation", "sun sensitivity"],
        "description": (
            "Vitamin A derivative that promotes cell turnover but can cause "
            "irritation."
        ),
    },
    {
        "name": "Hyaluronic Acid",
        "aliases": ["Sodium Hyaluronate"],
        "category": "Humectant",
        "health_rating": 10,
        "risk_factors": [],
        "description": (
            "Natural substance that attracts and retains moisture in the skin."
        ),
    },
    {
        "name": "Salicylic Acid",
        "aliases": ["Beta Hydroxy Acid", "BHA"],
        "category": "Exfoliant",
        "health_rating": 8,
        "risk_factors": ["skin irritation", "sun sensitivity"],
        "description": (
            "Exfoliating acid that helps clear pores but may cause irritation."
        ),
    },
    {
        "name": "Niacinamide",
        "aliases": ["Vitamin B3", "Nicotinamide"],
        "category": "Vitamin",
        "health_rating": 9,
        "risk_factors": [],
        "description": (
            "Form of vitamin B3 that improves skin texture and reduces inflammation."
        ),
    },
    {
        "name": "Titanium Dioxide",
        "aliases": [],
        "category": "Sunscreen",
        "health_rating": 8,
        "risk_factors": ["inhalation risk"],
        "description": "Mineral sunscreen ingredient that physically blocks UV rays.",
    },
    {
        "name": "Zinc Oxide",
        "aliases": [],
        "category": "Sunscreen",
        "health_rating": 9,
        "risk_factors": [],
        "description": (
            "Mineral sunscreen ingredient with anti-inflammatory properties."
        ),
    },
    {
        "name": "Aloe Vera",
        "aliases": ["Aloe Barbadensis Leaf Extract"],
        "category": "Soothing",
        "health_rating": 10,
        "risk_factors": [],
        "description": "Natural plant extract with soothing and healing properties.",
    },
    {
        "name": "Dimethicone",
        "aliases": ["Silicone"],
        "category": "Emollient",
        "health_rating": 6,
        "risk_factors": ["pore clogging"],
        "description": (
            "Silicone-based ingredient that creates a barrier on skin "
            "and can trap debris."
        ),
    },
]


def seed_catalog(
    repository: CatalogRepository,
    seed: list[dict[str, object]] | None = None,
) -> list[IngredientRecord]:
    """Insert seed ingredients whose name is not in the catalog yet."""
    existing = {record.name.lower() for record in repository.list_ingredients()}
    created: list[IngredientRecord] = []
    for payload in seed if seed is not None else SEED_INGREDIENTS:
        name = str(payload["name"]).lower()
        if name in existing:
            continue
        created.append(repository.insert_ingredient(payload))
        existing.add(name)
    return created


def main() -> None:
    """Seed the Supabase catalog configured in the environment."""
    configure_logging()
    settings = Settings()
    client = create_client(settings.supabase_url, settings.supabase_service_key)
    created = seed_catalog(SupabaseCatalogRepository(client))
    _logger.info("Seeded %s catalog ingredients", len(created))


if __name__ == "__main__":
    main()
