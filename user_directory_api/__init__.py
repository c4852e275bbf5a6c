"""
Top‑level package for the User Directory API.

All functionality lives in submodules under ``app``; the API client
is available as ``user_directory_api.client``.
"""

__all__ = []
