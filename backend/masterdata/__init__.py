"""Master-Data Application Package - reference-data administration backend.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
