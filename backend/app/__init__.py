"""Usuarios API Package — CRUD service for Usuario records.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
