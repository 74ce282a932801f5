# Middleware package init
"""
Postboard Backend — Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (outermost first):
    Request → [Request ID] → [Rate Limit] → [Logging] → [CORS] → Route Handler

    1. Request ID first: even a rate-limited response carries X-Request-ID
    2. Rate Limit: rejects excess credential requests before any DB work
    3. Logging: logs status and duration of everything that got through
    4. CORS: FastAPI's CORSMiddleware (handles preflight)
"""
