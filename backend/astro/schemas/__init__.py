"""
Astro — Pydantic Request/Response Schemas
==========================================

The API contract. Kept apart from the SQLAlchemy models so the wire format
(e.g. a service's nested category summary) can differ from the table layout.
"""
