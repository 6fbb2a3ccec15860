"""User health profile service."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from ava_health.domain.profiles import UserHealthProfile


class ProfileNotFoundError(LookupError):
    """Raised when a user has no stored profile."""


class ProfileRepository(Protocol):
    """Persistence interface for health profiles."""

    def get_profile(self, user_id: UUID) -> UserHealthProfile | None:
        """Return the stored profile for a user, if any."""

    def update_profile(
        self, user_id: UUID, changes: dict[str, list[str]]
    ) -> UserHealthProfile:
        """Apply field changes and return the updated profile."""


@dataclass
class ProfileService:
    """Read and update user health profiles."""

    repository: ProfileRepository

    def get_profile(self, user_id: UUID) -> UserHealthProfile:
        """Return a user's profile or raise ProfileNotFoundError."""
        profile = self.repository.get_profile(user_id)
        if profile is None:
            raise ProfileNotFoundError(f"User {user_id} not found")
        return profile

    def update_profile(
        self,
        user_id: UUID,
        *,
        allergies: list[str] | None = None,
        dietary_preferences: list[str] | None = None,
        skin_conditions: list[str] | None = None,
    ) -> UserHealthProfile:
        """Replace only the fields that were supplied."""
        self.get_profile(user_id)
        supplied = {
            "allergies": allergies,
            "dietary_preferences": dietary_preferences,
            "skin_conditions": skin_conditions,
        }
        changes = {
            name: list(values)
            for name, values in supplied.items()
            if values is not None
        }
        if not changes:
            return self.get_profile(user_id)
        return self.repository.update_profile(user_id, changes)
