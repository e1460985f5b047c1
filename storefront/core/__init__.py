"""Core — pure domain rules, types and storage contracts.

Invariants:
    - Core NEVER imports from api/, services/ or infrastructure/
"""
