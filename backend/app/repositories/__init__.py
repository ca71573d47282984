"""Repositories — SQLAlchemy implementations of the core boundary protocols.

Invariants:
    - Each repository wraps one request-scoped AsyncSession
    - Repositories never decide visibility or uniqueness; they only query and persist
"""
