"""Supabase repository for user health profiles."""

import json
import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from ava_health.domain.profiles import UserHealthProfile
from ava_health.services.profiles import ProfileRepository

_logger = logging.getLogger(__name__)

_COLUMNS = "allergies, dietary_preferences, skin_conditions"


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for user health profiles."""

    client: Client

    def get_profile(self, user_id: UUID) -> UserHealthProfile | None:
        """Return the stored profile for a user."""
        response = (
            self.client.table("user_profiles")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def update_profile(
        self, user_id: UUID, changes: dict[str, list[str]]
    ) -> UserHealthProfile:
        """Update the supplied profile fields and return the stored profile."""
        response = (
            self.client.table("user_profiles")
            .update({**changes, "updated_at": datetime.now(tz=UTC).isoformat()})
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update user profile")
        return _parse_profile(response.data[0])


def _parse_profile(row: dict[str, object]) -> UserHealthProfile:
    return UserHealthProfile(
        allergies=_parse_list(row.get("allergies")),
        dietary_preferences=_parse_list(row.get("dietary_preferences")),
        skin_conditions=_parse_list(row.get("skin_conditions")),
    )


def _parse_list(value: object) -> tuple[str, ...]:
    """Decode a profile column stored as an array or a JSON-encoded string."""
    if isinstance(value, str):
        if not value.strip():
            return ()
        try:
            value = json.loads(value)
        except ValueError:
            _logger.warning("Ignoring malformed profile column value: %r", value)
            return ()
    if isinstance(value, list):
        return tuple(str(item) for item in value)
    return ()
