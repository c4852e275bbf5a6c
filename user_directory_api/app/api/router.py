"""
Top‑level router for the API.

Routes are mounted at the root of the application (``/health``,
``/user``) rather than under a versioned prefix.  When new endpoint
modules are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import health, users

router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(users.router, tags=["users"])
