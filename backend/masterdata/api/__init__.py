"""API Layer - JSON routes, HTML fragment routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes are thin: they shape requests and responses, services do the work
"""
