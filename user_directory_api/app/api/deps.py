"""
FastAPI dependencies shared by endpoint modules.

The ``UserService`` instance lives on ``app.state`` and is attached by
``create_app``.  Tests replace it through
``app.dependency_overrides[get_user_service]``.
"""

from fastapi import Request

from ..services.user_service import UserService


def get_user_service(request: Request) -> UserService:
    """Return the service bound to the running application."""
    return request.app.state.user_service
