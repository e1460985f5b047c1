"""Services — one class per component, orchestrating storage calls around core rules.

Invariants:
    - Services receive repositories by injection, never reach for a global client
    - Each public method performs its storage work through exactly one repository
"""
