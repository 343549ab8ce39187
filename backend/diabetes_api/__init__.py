"""
Diabetes Diagnosis API — Application Package Initializer
=========================================================

What: Marks the `diabetes_api` directory as a Python package.
Who:  Used by uvicorn (`diabetes_api.main:app`), the setup script, and pytest.

Architecture Note:
    The backend follows the same layered layout for every endpoint:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      Services (Scoring, Auth, ...)  │  ← Plain async functions
    ├─────────────────────────────────────┤
    │          Query Gateway              │  ← Parameterized SQL, DatabaseError
    ├─────────────────────────────────────┤
    │     Models (Data Store schema)      │  ← SQLAlchemy tables
    └─────────────────────────────────────┘

    The connection pool lives in a `Database` handle created by the app
    factory and injected into handlers, so tests can swap it for a SQLite
    database or a mock gateway.
"""

__version__ = "1.0.0"
