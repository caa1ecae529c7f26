"""Account data export and deletion."""

import logging
from dataclasses import dataclass

from routine_forge.config import normalize_email
from routine_forge.domain.logs import DailyLog
from routine_forge.services.clock import Clock
from routine_forge.services.errors import InvalidRequestError
from routine_forge.services.logs import DailyLogRepository
from routine_forge.services.profiles import ProfileService

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccountExport:
    """Everything stored for one user."""

    exported_at: str
    email: str
    profile: dict[str, object] | None
    daily_logs: list[DailyLog]


@dataclass
class AccountService:
    """Service for account-level operations."""

    profile_service: ProfileService
    log_repository: DailyLogRepository
    clock: Clock

    def export(self, user_email: str) -> AccountExport:
        """Collect the profile row and all daily logs for download."""
        profile = self.profile_service.get_raw(user_email)
        email = normalize_email(user_email)
        return AccountExport(
            exported_at=self.clock.now().isoformat(),
            email=email,
            profile=profile,
            daily_logs=self.log_repository.list_all_logs(email),
        )

    def delete(self, user_email: str) -> None:
        """Remove all daily logs, then the profile."""
        email = normalize_email(user_email)
        if not email:
            raise InvalidRequestError("Missing email")
        self.log_repository.delete_logs(email)
        self.profile_service.delete_profile(email)
        _logger.info("Account data deleted: user=%s", email)
