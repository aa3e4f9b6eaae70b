"""Infrastructure Layer - persistence adapters, hashing and cross-cutting concerns.

Invariants:
    - Infrastructure implements the Protocols in core/repository_protocols.py
    - Raw driver/ORM exceptions never cross this layer untranslated
"""
