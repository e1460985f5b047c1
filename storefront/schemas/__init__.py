"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, storage result envelopes)

Design Decisions:
    - Separate from core: schemas are API contracts, core types are domain (DDD boundary)
"""
