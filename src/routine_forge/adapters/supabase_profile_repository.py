"""Supabase repository for user profiles."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from routine_forge.services.profiles import ProfileRepository

_TABLE = "profiles"


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile persistence."""

    client: Client

    def get_profile(self, user_email: str) -> dict[str, object] | None:
        """Return the profile row for a user, if present."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("user_email", user_email)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return dict(response.data[0])

    def upsert_profile(
        self, user_email: str, fields: dict[str, object]
    ) -> dict[str, object]:
        """Insert or update the row keyed by email and return it."""
        response = (
            self.client.table(_TABLE)
            .upsert(
                {
                    **fields,
                    "user_email": user_email,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                },
                on_conflict="user_email",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to upsert profile in Supabase")
        return dict(response.data[0])

    def delete_profile(self, user_email: str) -> None:
        """Delete the profile row for a user."""
        self.client.table(_TABLE).delete().eq("user_email", user_email).execute()
