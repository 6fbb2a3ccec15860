"""Conversational assistant over scanned products."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from ava_health.domain.profiles import UserHealthProfile
from ava_health.services.scan import ProductRepository

_logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """
You are Ava, a personal health assistant specializing in analyzing ingredients \
in food, beauty, and household products.

Your primary responsibilities:
1. Analyze product ingredients and their potential health implications
2. Provide personalized advice based on the user's health profile (allergies, \
dietary preferences, skin conditions)
3. Explain ingredient properties, benefits, and risks in clear, accessible language
4. Recommend safer alternatives when appropriate

Guidelines for your responses:
- Be factual and evidence-based when discussing ingredient health impacts
- Personalize advice based on the user's specific health profile
- For ingredients with low health ratings (below 5/10), explain the specific concerns
- Highlight ingredients that match the user's allergies or may trigger skin conditions
- For food products, focus on nutritional value, allergens, and dietary restrictions
- Maintain a helpful, informative tone without causing unnecessary alarm
- When recommending alternatives, suggest specific ingredient substitutes
""".strip()

FALLBACK_REPLY = (
    "I'm sorry, I'm having trouble analyzing this information right now. "
    "Please try again in a moment."
)


class ResponseGenerator(Protocol):
    """Interface for LLM text generation."""

    async def generate(self, prompt: str, system_prompt: str) -> str:
        """Return a reply for the prompt."""


@dataclass
class AssistantService:
    """Builds profile and product context and asks the LLM for a reply."""

    generator: ResponseGenerator
    product_repository: ProductRepository

    async def reply(
        self, message: str, profile: UserHealthProfile, product_id: UUID | None = None
    ) -> str:
        """Answer a user question, falling back to an apology on LLM failure."""
        prompt = build_prompt(message, self.build_context(profile, product_id))
        try:
            return await self.generator.generate(prompt, SYSTEM_PROMPT)
        except Exception:
            _logger.exception("Assistant reply generation failed")
            return FALLBACK_REPLY

    def build_context(
        self, profile: UserHealthProfile, product_id: UUID | None = None
    ) -> str:
        """Describe the user's profile and, if known, the scanned product."""
        lines = ["User has the following preferences:"]
        if profile.allergies:
            lines.append(f"- Allergies: {', '.join(profile.allergies)}")
        else:
            lines.append("- No known allergies")
        if profile.dietary_preferences:
            lines.append(
                f"- Dietary preferences: {', '.join(profile.dietary_preferences)}"
            )
        if profile.skin_conditions:
            lines.append(f"- Skin conditions: {', '.join(profile.skin_conditions)}")

        if product_id is not None:
            lines.extend(self._product_lines(product_id))
        return "\n".join(lines) + "\n"

    def _product_lines(self, product_id: UUID) -> list[str]:
        try:
            product = self.product_repository.get_product(product_id)
        except Exception:
            _logger.exception("Failed to load product %s for chat context", product_id)
            return []
        if product is None:
            return []
        lines = [
            "",
            f'User scanned a {product.category} product called "{product.name}" '
            "containing the following ingredients:",
        ]
        lines.extend(
            f"- {ingredient.name} (health rating: {ingredient.health_rating}/10)"
            f" - {ingredient.description}"
            for ingredient in product.ingredients
        )
        return lines


def build_prompt(message: str, context: str) -> str:
    """Combine context and the user's question into one prompt."""
    return (
        f'{context}\n\nUser asks: "{message}"\n\n'
        "Provide a helpful, accurate response about the health implications of "
        "this product based on the user's preferences and the ingredients."
    )
