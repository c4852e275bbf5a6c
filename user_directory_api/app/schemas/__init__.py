"""
Pydantic schema definitions for API payloads.

Schemas are separated from the store to decouple API representation
from the in‑memory data layout.
"""
