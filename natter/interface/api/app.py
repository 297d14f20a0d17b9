"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from natter.config import Settings
from natter.interface.api.routes import comments, health, likes, posts, users
from natter.util.di.container import create_container, setup_di
from natter.util.observability import instrument_fastapi

LOCAL_ORIGINS = ["http://localhost:3000", "http://localhost:5173"]


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Assemble the natter API.

    Logfire must already be configured (scripts/start_app.py does it).
    Tests pass their own container backed by in-memory repositories.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="natter API",
        description="Posts, threaded comments, likes and follows",
        version="0.1.0",
    )
    instrument_fastapi(app_instance)

    # The session cookie is sent cross-origin, so origins must be explicit
    origins = list(dict.fromkeys([settings.frontend_url, *LOCAL_ORIGINS]))
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    for module in (health, posts, comments, likes, users):
        app_instance.include_router(module.router)

    return app_instance


# Module-level instance for uvicorn; importing it requires configured Logfire
app = create_app()
