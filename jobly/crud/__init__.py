"""
CRUD operations (Create, Read, Update, Delete) for database models.

This layer keeps SQL out of the API routes, following the Repository pattern.
"""

from jobly.crud import user

__all__ = ["user"]
