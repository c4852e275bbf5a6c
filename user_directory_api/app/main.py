"""
Main entrypoint for the User Directory API.

This module assembles the FastAPI application, sets up logging and
wires a ``UserService`` into the request handlers.  ``create_app``
builds a fresh store for every application, so two apps never share
users.  An instance is created at import time as ``app`` for uvicorn::

    uvicorn user_directory_api.app.main:app --port 8080
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.router import router
from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .core.store import UserStore
from .services.user_service import UserService

logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None, service: Optional[UserService] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use; defaults to the module level ``settings``.
    service : Optional[UserService]
        Pre‑built service.  When omitted a new ``UserStore`` is seeded
        from ``app_settings.seed_users``.

    Returns
    -------
    FastAPI
        A configured FastAPI instance ready to be served.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings.log_level, app_settings.log_file)

    if service is None:
        store = UserStore(seed=app_settings.seed_users)
        service = UserService(store, database_url=app_settings.database_url)

    app = FastAPI(title=app_settings.project_name, version=app_settings.api_version)
    app.state.settings = app_settings
    app.state.user_service = service
    app.include_router(router)

    logger.info("%s %s configured", app_settings.project_name, app_settings.api_version)
    return app


app = create_app()
