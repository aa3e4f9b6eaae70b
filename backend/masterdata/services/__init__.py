"""Services Layer - the imperative shell around the pure pipeline checks.

Invariants:
    - Services raise taxonomy errors (core/errors.py); transports translate them
    - Every write takes an explicit actor for the audit columns

Design Decisions:
    - One generic ReferenceDataService; Person/User add wiring through a hook
"""
