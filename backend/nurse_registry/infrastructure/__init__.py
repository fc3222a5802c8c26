"""Infrastructure Layer — database session management and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from core/ domain logic beyond error types
    - All driver failures mapped to StoreError before leaving this layer
"""
