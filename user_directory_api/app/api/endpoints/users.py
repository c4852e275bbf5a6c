"""
User endpoints.

``GET /user`` greets a user by display name and answers in plain text.
Unknown ids are greeted with a placeholder name that is not stored.
``PUT /user`` saves a display name and echoes the stored record as
JSON.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from user_directory_api.app.api.deps import get_user_service
from user_directory_api.app.core.errors import UserLookupError
from user_directory_api.app.schemas.user import UserRead, UserSave
from user_directory_api.app.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter()


def first_query_value(request: Request, key: str) -> str:
    """Return the first value of ``key`` in the query string, or ``""``."""
    values = request.query_params.getlist(key)
    return values[0] if values else ""


@router.get("/user", response_class=PlainTextResponse)
async def get_user(
    request: Request,
    service: UserService = Depends(get_user_service),
):
    """Return ``Hello, <name>`` for the requested user.

    The id is the first ``id`` query value; a missing id is the empty
    string.  Lookup failures are reported as status 500 with the error
    text as the body.
    """
    user_id = first_query_value(request, "id")
    try:
        name = await service.get_user(user_id)
    except UserLookupError as exc:
        logger.error("User lookup failed: %s", exc)
        return PlainTextResponse(str(exc), status_code=500)
    return f"Hello, {name}"


@router.put("/user", response_model=UserRead)
async def save_user(
    body: UserSave,
    request: Request,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Store the display name for the first ``id`` query value."""
    user_id = first_query_value(request, "id")
    await service.save_user(user_id, body.name)
    return UserRead(id=user_id, name=body.name)
