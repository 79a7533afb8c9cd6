"""Services Layer — catalog writes, recipe search, author cascade deletion.

Invariants:
    - Services talk to storage only through the CatalogStore protocol
    - Every write runs inside exactly one store transaction

Design Decisions:
    - One file per concern for locality: search and cascade deletion carry
      the invariants, catalog_service carries the plain CRUD checks
"""
