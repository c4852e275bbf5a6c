"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  Services
receive their collaborators (stores, directories) at construction time
so API handlers and scripts can wire them explicitly.
"""
