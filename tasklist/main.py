"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

from collections.abc import Iterable

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tasklist.api.v1 import router as v1_router
from tasklist.core.config import Settings, get_settings
from tasklist.core.logging_config import configure_logging, log_requests
from tasklist.models.task import Task
from tasklist.models.user import User
from tasklist.services.credentials import UserRegistry
from tasklist.services.tasks import TaskStore


def create_app(
    settings: Settings | None = None,
    users: Iterable[User] | None = None,
    tasks: Iterable[Task] | None = None,
) -> FastAPI:
    """
    Build an application with its own user registry and task store.

    users defaults to the seeded registry; tasks defaults to the demo task
    (or an empty list when SEED_DEMO_TASK is off).
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="Tasklist API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings
    app.state.user_registry = UserRegistry() if users is None else UserRegistry(users)
    if tasks is not None:
        app.state.task_store = TaskStore(tasks)
    elif settings.SEED_DEMO_TASK:
        app.state.task_store = TaskStore.with_demo_task()
    else:
        app.state.task_store = TaskStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.APP_ENV == "dev" else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)

    app.include_router(v1_router, prefix=settings.API_V1_PREFIX)

    @app.get("/")
    def root() -> dict[str, str]:
        """Root route; minimal payload for discovery."""
        return {"message": "Tasklist API"}

    return app


app = create_app()
