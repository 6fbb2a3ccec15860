"""Offline OCR provider returning sample ingredient lists."""

import random
from dataclasses import dataclass, field

from ava_health.services.ocr import TextExtractor

SAMPLE_INGREDIENT_LISTS: tuple[str, ...] = (
    "Water, Glycerin, Phenoxyethanol, Fragrance, Tocopherol",
    "Aqua, Sodium Lauryl Sulfate, Fragrance, Parabens, Glycerin",
    "Water, Aloe Vera, Hyaluronic Acid, Niacinamide, Glycerin",
    "Water, Dimethicone, Titanium Dioxide, Zinc Oxide, Fragrance",
    "Aqua, Retinol, Glycerin, Hyaluronic Acid, Tocopherol",
)


@dataclass
class StaticTextExtractor(TextExtractor):
    """Text extractor for local development; ignores the image."""

    samples: tuple[str, ...] = SAMPLE_INGREDIENT_LISTS
    rng: random.Random = field(default_factory=random.Random)

    async def extract_text(self, image_base64: str) -> str:
        """Return one of the sample ingredient lists."""
        return self.rng.choice(self.samples)
