"""Domain models for user health profiles."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserHealthProfile:
    """Allergy, diet and skin-condition data used to personalize scans."""

    allergies: tuple[str, ...] = ()
    dietary_preferences: tuple[str, ...] = ()
    skin_conditions: tuple[str, ...] = ()
