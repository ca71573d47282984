"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, db/ or models/
    - Entities reach the core through the UsuarioLike protocol
    - All functions are deterministic given their inputs (clocks are injected)
"""
