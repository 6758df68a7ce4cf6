"""
Restaurant Ordering API: Application Package
===============================================

Layered the usual way:

    ┌─────────────────────────────────────┐
    │   Routes (app/routes)               │  ← HTTP: parse, gate, envelope
    ├─────────────────────────────────────┤
    │   Services (app/services)           │  ← rules, pagination, hashing
    ├─────────────────────────────────────┤
    │   Models & Schemas                  │  ← SQLAlchemy tables, pydantic bodies
    ├─────────────────────────────────────┤
    │   Database (app/database.py)        │  ← async engine + per-request session
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
