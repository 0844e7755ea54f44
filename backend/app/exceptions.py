"""
Aviary Backend — Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions for the few failure paths this service has.
Why:   Global exception handlers (registered in main.py) turn these into
       structured JSON error responses without leaking internal details.
How:   Each exception carries a user-facing message and an optional context
       dict that is logged server-side but never returned to the client.

Exception Hierarchy:
    AviaryError (base)
    ├── DatabaseError   → 500 Internal Server Error (store unavailable)
    └── SeedDataError   → raised while loading seed records (startup / CLI)

The birds endpoints define no client errors: a reachable store always
yields 200, and anything else is a server error.
"""

from typing import Any, Dict, Optional


class AviaryError(Exception):
    """
    Base exception for all Aviary application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class DatabaseError(AviaryError):
    """
    Raised when reading the bird store fails.

    HTTP: 500 Internal Server Error

    The message returned to the client is always generic. The underlying
    SQLAlchemy error type is kept in `context` for the server log.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class SeedDataError(AviaryError):
    """
    Raised when seed records cannot be loaded.

    When: The seed file is missing, is not valid JSON, is not an array,
          or contains an entry that is not a {"name", "species"} object.
    """

    def __init__(
        self,
        message: str = "Seed data is invalid",
        source: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if source:
            ctx["source"] = source
        super().__init__(message=message, context=ctx)
        self.source = source
