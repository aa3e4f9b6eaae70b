"""Route Modules - one file per resource or transport.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never contain business rules (delegate to services)
"""
