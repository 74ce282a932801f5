"""
Postboard Backend — Application Package Initializer
====================================================

What: Marks the `postboard` directory as a Python package.
Why:  Enables module imports like `from postboard.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend is split into thin layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      Services (Request Handlers)    │  ← Validation, hashing, orchestration
    ├─────────────────────────────────────┤
    │        Stores (Persistence)         │  ← One store per record type
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Sessions)          │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    A route receives an already-parsed request body, hands it to exactly one
    service method, and returns whatever that method shapes. Services never
    see HTTP objects; stores never see request payloads.
"""

__version__ = "1.0.0"
