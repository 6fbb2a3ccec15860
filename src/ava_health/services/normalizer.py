"""Splitting raw label text into candidate ingredient names."""

import re

_SECTION_PATTERNS = (
    re.compile(r"ingredients:?\s*([^.]*)", re.IGNORECASE),
    re.compile(r"contains:?\s*([^.]*)", re.IGNORECASE),
    re.compile(r"composition:?\s*([^.]*)", re.IGNORECASE),
)
_MIN_LIST_PARTS = 4


def normalize(raw_text: str) -> list[str]:
    """Split comma-separated text into trimmed, non-empty tokens.

    Order and duplicates are preserved, and casing is left alone; matching
    is case-insensitive further down the pipeline.
    """
    tokens = (chunk.strip() for chunk in raw_text.split(","))
    return [token for token in tokens if token]


def extract_ingredients_section(text: str) -> str | None:
    """Find the ingredient list inside free-form OCR text.

    Looks for a labelled section first ("Ingredients:", "Contains:",
    "Composition:") and falls back to the first paragraph that reads like a
    comma-separated list. Returns None when neither is present.
    """
    for pattern in _SECTION_PATTERNS:
        match = pattern.search(text)
        if match and match.group(1):
            return match.group(1).strip()

    for paragraph in text.split("\n\n"):
        if "," in paragraph and len(paragraph.split(",")) >= _MIN_LIST_PARTS:
            return paragraph.strip()
    return None
