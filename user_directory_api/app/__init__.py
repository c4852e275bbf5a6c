"""
Application package initializer.

Configuration, the user store and error types live in ``core``;
business logic in ``services``; request and response models in
``schemas``; and HTTP routes in ``api``.  ``main`` ties them together
and exposes the ASGI application as ``user_directory_api.app.main:app``.

Importing this package does not build the application, so scripts that
only need ``core`` or ``services`` stay free of FastAPI start‑up work.
"""
