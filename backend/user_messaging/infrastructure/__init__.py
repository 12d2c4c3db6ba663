"""Infrastructure Layer — store access and cross-cutting concerns.

Invariants:
    - All store errors mapped to DatabaseError before leaving this layer
"""
