"""Storefront Application Package — users, catalog and orders over MongoDB.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
