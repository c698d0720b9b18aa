"""FastAPI application factory for the users API."""
from __future__ import annotations

import logging

from fastapi import FastAPI

from usersapi.core.config import Settings, get_settings
from usersapi.core.errors import install_error_handlers
from usersapi.core.request_log import RequestLogMiddleware, configure_logging
from usersapi.routers import demo as demo_router
from usersapi.routers import users as users_router
from usersapi.services.user_service import UserStore

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build an app bound to one users file. Compatible with uvicorn --factory."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Users API")
    app.state.settings = settings
    app.state.user_store = UserStore(settings.users_file, serialize_writes=settings.serialize_writes)

    app.add_middleware(RequestLogMiddleware)
    install_error_handlers(app)

    app.include_router(users_router.router)
    app.include_router(demo_router.router)

    logger.info(
        "Users file: %s (serialized writes: %s)",
        settings.users_file,
        "on" if settings.serialize_writes else "off",
    )
    return app


app = create_app()
