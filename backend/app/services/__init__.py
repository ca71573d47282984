"""Services Layer — orchestration between the pure core and persistence.

Invariants:
    - Services own the async IO sequencing; decisions come from core/ pure functions
    - Services raise UsuariosApiError subclasses; HTTP mapping happens in api/
"""
