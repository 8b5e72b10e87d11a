"""
Astro — Application Package Initializer
========================================

What:  Marks the `astro` directory as a Python package.
Who:   Used by uvicorn (`uvicorn astro.main:app`), Alembic and pytest.

Architecture Note:
    The backend follows the usual layered split:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← CRUD rules, validation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Next to the server sits `astro.client`: the stores a dashboard front end
    keeps in sync with this API (config, themes, local preferences, modal
    windows).
"""

__version__ = "1.0.0"
