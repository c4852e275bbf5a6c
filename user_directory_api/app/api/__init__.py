"""
API package containing the HTTP routes.

``router`` aggregates the endpoint modules; ``deps`` holds the shared
FastAPI dependencies.
"""
