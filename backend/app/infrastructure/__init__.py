"""Infrastructure Layer — database session management and logging setup.

Invariants:
    - Infrastructure never imports business rules from core/ (errors only)
"""
