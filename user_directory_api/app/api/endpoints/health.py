"""
Liveness endpoint.

``/health`` answers ``ok`` with status 200 for any HTTP method so that
load balancers and probes configured with HEAD or POST work unchanged.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

HEALTH_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/health", methods=HEALTH_METHODS, response_class=PlainTextResponse)
async def health() -> str:
    return "ok"
