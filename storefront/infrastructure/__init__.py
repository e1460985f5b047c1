"""Infrastructure — MongoDB access and logging setup.

Invariants:
    - The only layer that imports pymongo clients/collections
"""
