"""Application entrypoint for the continuous assessment backend.

This module wires together the FastAPI application with its CORS
configuration and the root and users routers. It is the root that other
modules depend on when the API process starts.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import root_router, users_router
from app.core.config import Settings, settings as default_settings


def create_application(settings: Settings | None = None) -> FastAPI:
    """Assemble and configure the FastAPI application instance.

    - Applies CORS settings sourced from environment-driven `settings`.
    - Registers the root and users routers.
    """

    settings = settings or default_settings

    application = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.PROJECT_VERSION,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(root_router)
    application.include_router(users_router)

    return application


app = create_application()
