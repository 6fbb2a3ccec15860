"""OCR service that turns label photos into ingredient text."""

import base64
import re
from dataclasses import dataclass
from typing import Protocol

from ava_health.services.normalizer import extract_ingredients_section

_DATA_URL_PREFIX = re.compile(r"^data:image/\w+;base64,")


class TextExtractor(Protocol):
    """Interface for OCR providers."""

    async def extract_text(self, image_base64: str) -> str:
        """Return the raw text recognized in a base64-encoded image."""


@dataclass
class OcrService:
    """Runs the configured OCR provider and isolates the ingredient list."""

    extractor: TextExtractor

    async def extract(self, image: bytes | str) -> str:
        """Extract ingredient text from raw bytes or a base64 string."""
        text = await self.extractor.extract_text(_prepare_image_data(image))
        return extract_ingredients_section(text) or text


def _prepare_image_data(image: bytes | str) -> str:
    """Return bare base64 data for an image payload."""
    if isinstance(image, bytes):
        return base64.b64encode(image).decode("utf-8")
    if isinstance(image, str):
        return _DATA_URL_PREFIX.sub("", image)
    raise TypeError("Invalid image format")
