"""ASGI entrypoint for the RoutineForge API.

Run with ``uvicorn routine_forge.api.asgi:app`` once the Supabase settings are
present in the environment.
"""

from routine_forge.api.app import create_app
from routine_forge.containers import build_container

app = create_app(build_container())
