"""
Blog API - Application Package
===============================

What: Category CRUD service built on FastAPI and async SQLAlchemy.
Who:  Imported by uvicorn (`blog.main:app`), Alembic and pytest.

Layers:
    ┌─────────────────────────────────────┐
    │        Routes (HTTP layer)          │  ← status codes, headers, envelopes
    ├─────────────────────────────────────┤
    │        Services (business rules)    │  ← validation, error codes
    ├─────────────────────────────────────┤
    │        Repositories (data access)   │  ← list / get / add / update / remove / save
    ├─────────────────────────────────────┤
    │        Models & Schemas             │  ← SQLAlchemy ORM + Pydantic
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
