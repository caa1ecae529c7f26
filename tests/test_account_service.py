"""Tests for account export and deletion."""

import pytest

from routine_forge.containers import AppContainer
from routine_forge.services.errors import InvalidRequestError
from tests.conftest import (
    EXAMPLE_PROFILE,
    InMemoryDailyLogRepository,
    InMemoryProfileRepository,
    make_log,
)


def test_export_collects_profile_and_logs(
    container: AppContainer,
    profile_repository: InMemoryProfileRepository,
    log_repository: InMemoryDailyLogRepository,
) -> None:
    profile_repository.profiles["asha@example.com"] = dict(EXAMPLE_PROFILE)
    log_repository.add(make_log("2026-01-13"))
    log_repository.add(make_log("2026-01-14"))

    export = container.account_service.export("ASHA@example.com")

    assert export.email == "asha@example.com"
    assert export.exported_at == "2026-01-15T04:30:00+00:00"
    assert export.profile is not None
    assert [log.date for log in export.daily_logs] == ["2026-01-14", "2026-01-13"]


def test_delete_removes_only_that_user(
    container: AppContainer,
    profile_repository: InMemoryProfileRepository,
    log_repository: InMemoryDailyLogRepository,
) -> None:
    profile_repository.profiles["asha@example.com"] = dict(EXAMPLE_PROFILE)
    profile_repository.profiles["other@example.com"] = dict(EXAMPLE_PROFILE)
    log_repository.add(make_log("2026-01-14"))
    log_repository.add(make_log("2026-01-14", user_email="other@example.com"))

    container.account_service.delete("asha@example.com")

    assert list(profile_repository.profiles) == ["other@example.com"]
    assert log_repository.list_all_logs("asha@example.com") == []
    assert len(log_repository.list_all_logs("other@example.com")) == 1


def test_delete_without_profile_is_allowed(container: AppContainer) -> None:
    container.account_service.delete("asha@example.com")


def test_delete_requires_email(container: AppContainer) -> None:
    with pytest.raises(InvalidRequestError):
        container.account_service.delete("  ")
