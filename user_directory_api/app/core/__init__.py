"""
Core building blocks: configuration, logging, errors and the user store.

Nothing in this package depends on FastAPI; the services and scripts
import from here directly.
"""
