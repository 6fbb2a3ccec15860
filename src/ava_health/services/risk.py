"""Personalized risk evaluation for catalog ingredients."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from ava_health.domain.ingredients import AnalyzedIngredient, IngredientRecord
from ava_health.domain.profiles import UserHealthProfile

ALLERGY_REASON = "allergy"
LOW_RATING_REASON = "low health rating"
DEFAULT_RATING_FLOOR = 5


@dataclass(frozen=True)
class ProfileRule:
    """Flag an ingredient when a profile value meets an ingredient tag.

    The rule fires when ``profile_field`` contains ``required_value`` and
    ``ingredient_field`` shares at least one entry with ``required_values``.
    Both checks are exact string comparisons.
    """

    profile_field: str
    required_value: str
    ingredient_field: str
    required_values: frozenset[str]
    reason: str

    def applies(
        self, ingredient: IngredientRecord, profile: UserHealthProfile
    ) -> bool:
        profile_values = getattr(profile, self.profile_field)
        if self.required_value not in profile_values:
            return False
        ingredient_values = getattr(ingredient, self.ingredient_field)
        return any(value in self.required_values for value in ingredient_values)


# Only these two skin conditions carry a rule. Others such as "Acne" or
# "Rosacea" fall through to the allergy and rating checks.
DEFAULT_RULES: tuple[ProfileRule, ...] = (
    ProfileRule(
        profile_field="skin_conditions",
        required_value="Sensitive Skin",
        ingredient_field="risk_factors",
        required_values=frozenset({"skin irritation"}),
        reason="sensitive skin",
    ),
    ProfileRule(
        profile_field="skin_conditions",
        required_value="Eczema",
        ingredient_field="risk_factors",
        required_values=frozenset({"skin irritation", "allergic reactions"}),
        reason="eczema",
    ),
)


@dataclass(frozen=True)
class RiskPolicy:
    """Rule set deciding whether an ingredient is risky for a profile."""

    rules: tuple[ProfileRule, ...] = field(default=DEFAULT_RULES)
    rating_floor: int = DEFAULT_RATING_FLOOR

    def reasons(
        self, ingredient: IngredientRecord, profile: UserHealthProfile
    ) -> tuple[str, ...]:
        """Return the reasons an ingredient is risky, in audit order."""
        found: list[str] = []
        if _matches_allergy(ingredient, profile.allergies):
            found.append(ALLERGY_REASON)
        found.extend(
            rule.reason for rule in self.rules if rule.applies(ingredient, profile)
        )
        if ingredient.health_rating < self.rating_floor:
            found.append(LOW_RATING_REASON)
        return tuple(found)

    def is_risky(
        self, ingredient: IngredientRecord, profile: UserHealthProfile
    ) -> bool:
        """Return True when any rule flags the ingredient."""
        return bool(self.reasons(ingredient, profile))

    def annotate(
        self, ingredients: Iterable[IngredientRecord], profile: UserHealthProfile
    ) -> list[AnalyzedIngredient]:
        """Pair each ingredient with its verdict, keeping input order."""
        annotated = []
        for ingredient in ingredients:
            reasons = self.reasons(ingredient, profile)
            annotated.append(
                AnalyzedIngredient(
                    ingredient=ingredient,
                    is_risky=bool(reasons),
                    risk_reasons=reasons,
                )
            )
        return annotated


_DEFAULT_POLICY = RiskPolicy()


def is_risky(ingredient: IngredientRecord, profile: UserHealthProfile) -> bool:
    """Evaluate an ingredient against the default policy."""
    return _DEFAULT_POLICY.is_risky(ingredient, profile)


def _matches_allergy(ingredient: IngredientRecord, allergies: Iterable[str]) -> bool:
    names = [name.lower() for name in ingredient.all_names()]
    for allergy in allergies:
        term = allergy.strip().lower()
        if term and any(term in name for name in names):
            return True
    return False
