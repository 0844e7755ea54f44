"""
Aviary Backend — Application Package Initializer
==================================================

Architecture Note:
    The backend follows the same layering for a very small surface:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns, render mode
    ├─────────────────────────────────────┤
    │   Services (store reads, rendering) │  ← BirdService, bird_renderer
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
