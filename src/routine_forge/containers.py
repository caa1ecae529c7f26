"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from routine_forge.adapters.supabase_daily_log_repository import (
    SupabaseDailyLogRepository,
)
from routine_forge.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from routine_forge.config import Settings
from routine_forge.services.account import AccountService
from routine_forge.services.clock import Clock, SystemClock
from routine_forge.services.logs import DailyLogService
from routine_forge.services.plans import PlanService
from routine_forge.services.profiles import ProfileService
from routine_forge.services.reports import ReportService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    clock: Clock
    profile_service: ProfileService
    plan_service: PlanService
    log_service: DailyLogService
    report_service: ReportService
    account_service: AccountService


def build_services(
    settings: Settings,
    profile_service: ProfileService,
    log_service: DailyLogService,
    clock: Clock,
) -> tuple[PlanService, ReportService, AccountService]:
    """Wire the read-side services on top of profile and log storage."""
    report_service = ReportService(
        repository=log_service.repository,
        clock=clock,
        offset_minutes=settings.timezone_offset_minutes,
        default_days=settings.report_default_days,
    )
    plan_service = PlanService(
        profile_service=profile_service,
        report_service=report_service,
        clock=clock,
        offset_minutes=settings.timezone_offset_minutes,
        streak_lookback_days=settings.plan_streak_lookback_days,
    )
    account_service = AccountService(
        profile_service=profile_service,
        log_repository=log_service.repository,
        clock=clock,
    )
    return plan_service, report_service, account_service


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    clock = SystemClock()
    profile_service = ProfileService(SupabaseProfileRepository(supabase_client))
    log_service = DailyLogService(
        repository=SupabaseDailyLogRepository(supabase_client),
        clock=clock,
        offset_minutes=resolved_settings.timezone_offset_minutes,
    )
    plan_service, report_service, account_service = build_services(
        resolved_settings, profile_service, log_service, clock
    )

    return AppContainer(
        settings=resolved_settings,
        clock=clock,
        profile_service=profile_service,
        plan_service=plan_service,
        log_service=log_service,
        report_service=report_service,
        account_service=account_service,
    )
