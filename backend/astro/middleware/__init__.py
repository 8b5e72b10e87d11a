"""
Astro — Middleware Package
===========================

Cross-cutting concerns applied to every request.

Middleware Chain (order matters):
    Request → [Rate Limit] → [Request ID] → [Access Log] → [GZip] → [CORS] → Route

    Responses travel back through the same chain in reverse, so the request
    ID header is present on every response and the access log sees the final
    status code.
"""
