"""Tests for the personalized risk policy."""

from ava_health.domain.profiles import UserHealthProfile
from ava_health.services.risk import (
    DEFAULT_RULES,
    ProfileRule,
    RiskPolicy,
    is_risky,
)
from tests.conftest import make_ingredient

EMPTY_PROFILE = UserHealthProfile()


def test_allergy_matches_canonical_name() -> None:
    fragrance = make_ingredient("Fragrance", health_rating=8)

    assert is_risky(fragrance, UserHealthProfile(allergies=("Fragrance",)))


def test_allergy_matches_alias_case_insensitively() -> None:
    fragrance = make_ingredient("Fragrance", aliases=("Parfum",), health_rating=8)

    assert is_risky(fragrance, UserHealthProfile(allergies=("parfum",)))


def test_allergy_term_is_substring_of_name() -> None:
    parabens = make_ingredient(
        "Parabens", aliases=("Methylparaben",), health_rating=8
    )

    assert is_risky(parabens, UserHealthProfile(allergies=("methylparab",)))


def test_blank_allergy_does_not_flag_everything() -> None:
    water = make_ingredient("Water", health_rating=10)

    assert not is_risky(water, UserHealthProfile(allergies=("", "  ")))


def test_low_rating_is_risky_for_everyone() -> None:
    ingredient = make_ingredient("Sodium Lauryl Sulfate", health_rating=4)

    assert is_risky(ingredient, EMPTY_PROFILE)


def test_rating_of_five_is_not_risky_on_its_own() -> None:
    ingredient = make_ingredient("Phenoxyethanol", health_rating=5)

    assert not is_risky(ingredient, EMPTY_PROFILE)


def test_sensitive_skin_rule() -> None:
    retinol = make_ingredient(
        "Retinol", health_rating=7, risk_factors=("skin irritation",)
    )
    profile = UserHealthProfile(skin_conditions=("Sensitive Skin",))

    assert RiskPolicy().reasons(retinol, profile) == ("sensitive skin",)


def test_sensitive_skin_ignores_allergic_reactions() -> None:
    ingredient = make_ingredient(
        "Parabens", health_rating=7, risk_factors=("allergic reactions",)
    )

    profile = UserHealthProfile(skin_conditions=("Sensitive Skin",))

    assert not is_risky(ingredient, profile)


def test_eczema_rule_covers_allergic_reactions() -> None:
    ingredient = make_ingredient(
        "Parabens", health_rating=7, risk_factors=("allergic reactions",)
    )

    assert is_risky(ingredient, UserHealthProfile(skin_conditions=("Eczema",)))


def test_unlisted_skin_condition_has_no_rule() -> None:
    ingredient = make_ingredient(
        "Salicylic Acid", health_rating=7, risk_factors=("skin irritation",)
    )

    assert not is_risky(ingredient, UserHealthProfile(skin_conditions=("Rosacea",)))


def test_reasons_are_reported_in_audit_order() -> None:
    fragrance = make_ingredient(
        "Fragrance",
        health_rating=4,
        risk_factors=("allergic reactions", "skin irritation"),
    )
    profile = UserHealthProfile(
        allergies=("Fragrance",), skin_conditions=("Sensitive Skin", "Eczema")
    )

    assert RiskPolicy().reasons(fragrance, profile) == (
        "allergy",
        "sensitive skin",
        "eczema",
        "low health rating",
    )


def test_rule_table_extends_without_new_branches() -> None:
    acne_rule = ProfileRule(
        profile_field="skin_conditions",
        required_value="Acne",
        ingredient_field="risk_factors",
        required_values=frozenset({"pore clogging"}),
        reason="acne",
    )
    policy = RiskPolicy(rules=(*DEFAULT_RULES, acne_rule))
    dimethicone = make_ingredient(
        "Dimethicone", health_rating=6, risk_factors=("pore clogging",)
    )
    profile = UserHealthProfile(skin_conditions=("Acne",))

    assert not is_risky(dimethicone, profile)
    assert policy.is_risky(dimethicone, profile)


def test_annotate_keeps_order() -> None:
    water = make_ingredient("Water", health_rating=10)
    sls = make_ingredient("SLS", health_rating=3)

    annotated = RiskPolicy().annotate([sls, water], EMPTY_PROFILE)

    assert [item.ingredient for item in annotated] == [sls, water]
    assert [item.is_risky for item in annotated] == [True, False]
