"""Infrastructure Layer — database sessions, the SQL-backed catalog store, logging.

Invariants:
    - Only this layer talks to SQLAlchemy engines and sessions directly
    - SQLAlchemy exceptions never cross this layer unmapped
"""
