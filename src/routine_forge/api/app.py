"""FastAPI application factory."""

import logging
from dataclasses import asdict

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from routine_forge.api.models import (
    AccountDeletePayload,
    DailyLogPayload,
    ProfilePayload,
    SettingsUpdatePayload,
)
from routine_forge.app_logging import configure_logging
from routine_forge.containers import AppContainer
from routine_forge.domain.logs import DailyLog, Report
from routine_forge.domain.plan import DailyPlan, RoutineBlock, WorkoutItem
from routine_forge.domain.profile import SettingsView
from routine_forge.services.errors import InvalidRequestError, ProfileNotFoundError
from routine_forge.services.logs import to_number_or_none

PROFILE_MISSING_MESSAGE = "Profile not found. Complete onboarding."


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="RoutineForge")
    app.state.container = container

    @app.exception_handler(ProfileNotFoundError)
    async def profile_missing(
        request: Request, exc: ProfileNotFoundError
    ) -> JSONResponse:
        logger.info("Profile missing: user=%s", exc.user_email)
        return JSONResponse(
            status_code=404,
            content={
                "ok": False,
                "code": "profile_missing",
                "message": PROFILE_MISSING_MESSAGE,
            },
        )

    @app.exception_handler(InvalidRequestError)
    async def invalid_request(
        request: Request, exc: InvalidRequestError
    ) -> JSONResponse:
        return JSONResponse(status_code=400, content={"ok": False, "message": str(exc)})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/plan")
    def get_plan(request: Request, email: str = "") -> dict[str, object]:
        """Return today's plan for a user."""
        state_container: AppContainer = request.app.state.container
        plan = state_container.plan_service.get_today_plan(email)
        return _serialize_plan(plan)

    @app.get("/reports")
    def get_reports(
        request: Request, email: str = "", days: str | None = None
    ) -> dict[str, object]:
        """Return recent logs and their summary; unusable ``days`` means default."""
        state_container: AppContainer = request.app.state.container
        report = state_container.report_service.get_report(
            email, to_number_or_none(days)
        )
        return _serialize_report(report)

    @app.get("/log")
    def get_log(request: Request, email: str = "", date: str = "") -> dict[str, object]:
        """Return the log stored for one day, or null."""
        state_container: AppContainer = request.app.state.container
        log = state_container.log_service.get_log(email, date)
        return {"ok": True, "log": _serialize_log(log) if log else None}

    @app.post("/log")
    def save_log(payload: DailyLogPayload, request: Request) -> dict[str, object]:
        """Create or replace the log for a day."""
        state_container: AppContainer = request.app.state.container
        saved = state_container.log_service.save_log(payload.model_dump())
        return {"ok": True, "log": _serialize_log(saved)}

    @app.post("/profile")
    def save_profile(payload: ProfilePayload, request: Request) -> dict[str, object]:
        """Store onboarding answers."""
        state_container: AppContainer = request.app.state.container
        fields = payload.model_dump(exclude={"user_email"}, exclude_none=True)
        saved = state_container.profile_service.save_profile(
            payload.user_email if isinstance(payload.user_email, str) else "",
            fields,
        )
        return {"ok": True, "profile": saved}

    @app.get("/settings")
    def get_settings(request: Request, email: str = "") -> dict[str, object]:
        """Return account, profile subset and preferences."""
        state_container: AppContainer = request.app.state.container
        view = state_container.profile_service.get_settings(email)
        return _serialize_settings(view)

    @app.post("/settings")
    def update_settings(
        payload: SettingsUpdatePayload, request: Request
    ) -> dict[str, object]:
        """Apply a partial settings update."""
        state_container: AppContainer = request.app.state.container
        changes = payload.model_dump(exclude={"email"}, exclude_none=True)
        saved = state_container.profile_service.update_settings(
            payload.email if isinstance(payload.email, str) else "", changes
        )
        return {"ok": True, "profile": saved}

    @app.get("/account/export")
    def export_account(request: Request, email: str = "") -> JSONResponse:
        """Download every stored record for a user."""
        state_container: AppContainer = request.app.state.container
        if not email.strip():
            raise InvalidRequestError("Missing email")
        export = state_container.account_service.export(email)
        filename = f"routineforge-data-{export.exported_at[:10]}.json"
        return JSONResponse(
            content={
                "ok": True,
                "data": {
                    "exportedAt": export.exported_at,
                    "account": {
                        "email": export.email,
                        "fullName": export.email.split("@")[0],
                    },
                    "profile": export.profile,
                    "dailyLogs": [_serialize_log(log) for log in export.daily_logs],
                },
            },
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    @app.post("/account/delete")
    def delete_account(
        payload: AccountDeletePayload, request: Request
    ) -> dict[str, object]:
        """Delete every stored record for a user."""
        state_container: AppContainer = request.app.state.container
        state_container.account_service.delete(
            payload.email if isinstance(payload.email, str) else ""
        )
        return {"ok": True}

    return app


def _serialize_plan(plan: DailyPlan) -> dict[str, object]:
    return {
        "ok": True,
        "userEmail": plan.user_email,
        "greeting": plan.greeting,
        "greetingName": plan.greeting_name,
        "currentBlock": asdict(plan.current_block),
        "streakDays": plan.streak_days,
        "routine": [asdict(item) for item in plan.routine],
        "meals": [asdict(meal) for meal in plan.meals],
        "kcalTotal": plan.kcal_total,
        "workout": _serialize_workout(plan.workout),
        "routineBlocks": [_serialize_block(block) for block in plan.routine_blocks],
    }


def _serialize_workout(workout: WorkoutItem) -> dict[str, object]:
    return {
        "title": workout.title,
        "subtitle": workout.subtitle,
        "durationMin": workout.duration_min,
        "items": [
            {"name": item.name, "setsReps": item.sets_reps} for item in workout.items
        ],
    }


def _serialize_block(block: RoutineBlock) -> dict[str, object]:
    return {
        "key": block.key,
        "start": block.start,
        "end": block.end,
        "icon": block.icon,
        "title": block.title,
        "bullets": list(block.bullets),
    }


def _serialize_log(log: DailyLog) -> dict[str, object]:
    return {
        "userEmail": log.user_email,
        "date": log.date,
        "weightKg": log.weight_kg,
        "waterLiters": log.water_liters,
        "sleepHours": log.sleep_hours,
        "steps": log.steps,
        "workoutDone": log.workout_done,
        "mealsFollowedPct": log.meals_followed_pct,
        "mood": log.mood,
        "notes": log.notes,
    }


def _serialize_report(report: Report) -> dict[str, object]:
    summary = report.summary
    return {
        "ok": True,
        "logs": [_serialize_log(log) for log in report.logs],
        "summary": {
            "daysLogged": summary.days_logged,
            "currentStreak": summary.current_streak,
            "workoutsDone": summary.workouts_done,
            "avgMealsPct": summary.avg_meals_pct,
            "avgSleep": summary.avg_sleep,
            "avgWater": summary.avg_water,
            "latestWeight": summary.latest_weight,
        },
    }


def _serialize_settings(view: SettingsView) -> dict[str, object]:
    return {
        "ok": True,
        "account": {"name": view.name, "email": view.email},
        "profile": {
            "weightKg": view.weight_kg,
            "heightCm": view.height_cm,
            "goal": view.goal.value,
            "dietPreference": view.diet_preference.value,
            "workoutLocation": view.workout_location.value,
            "workoutMinutesPerDay": view.workout_minutes_per_day,
            "experience": view.experience.value,
        },
        "preferences": {
            "darkMode": view.preferences.dark_mode,
            "dailyReminder": view.preferences.daily_reminder,
            "workoutReminder": view.preferences.workout_reminder,
            "mealReminder": view.preferences.meal_reminder,
        },
    }
