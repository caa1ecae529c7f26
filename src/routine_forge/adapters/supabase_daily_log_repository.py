"""Supabase repository for daily logs."""

from dataclasses import asdict, dataclass
from datetime import UTC, datetime

from supabase import Client

from routine_forge.domain.logs import DailyLog
from routine_forge.services.logs import DailyLogRepository, log_from_record

_TABLE = "daily_logs"
_COLUMNS = (
    "user_email, date, weight_kg, water_liters, sleep_hours, steps, "
    "workout_done, meals_followed_pct, mood, notes"
)


@dataclass
class SupabaseDailyLogRepository(DailyLogRepository):
    """Supabase implementation for daily log persistence."""

    client: Client

    def get_log(self, user_email: str, day: str) -> DailyLog | None:
        """Return the log for a user and date."""
        response = (
            self.client.table(_TABLE)
            .select(_COLUMNS)
            .eq("user_email", user_email)
            .eq("date", day)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return log_from_record(response.data[0])

    def upsert_log(self, log: DailyLog) -> DailyLog:
        """Insert or replace the row for the log's (user, date) pair."""
        response = (
            self.client.table(_TABLE)
            .upsert(
                {**asdict(log), "updated_at": datetime.now(tz=UTC).isoformat()},
                on_conflict="user_email,date",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to upsert daily log in Supabase")
        return log_from_record(response.data[0])

    def list_logs_since(
        self, user_email: str, from_date: str, limit: int
    ) -> list[DailyLog]:
        """Return logs on or after ``from_date``, newest first."""
        response = (
            self.client.table(_TABLE)
            .select(_COLUMNS)
            .eq("user_email", user_email)
            .gte("date", from_date)
            .order("date", desc=True)
            .limit(limit)
            .execute()
        )
        return [log_from_record(row) for row in response.data or []]

    def list_all_logs(self, user_email: str) -> list[DailyLog]:
        """Return all logs for a user, newest first."""
        response = (
            self.client.table(_TABLE)
            .select(_COLUMNS)
            .eq("user_email", user_email)
            .order("date", desc=True)
            .execute()
        )
        return [log_from_record(row) for row in response.data or []]

    def delete_logs(self, user_email: str) -> None:
        """Delete all logs for a user."""
        self.client.table(_TABLE).delete().eq("user_email", user_email).execute()
