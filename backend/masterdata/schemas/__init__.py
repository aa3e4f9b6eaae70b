"""Pydantic Schemas - request/response shapes for the JSON API.

Invariants:
    - Request schemas check SHAPE only (types); field rules live in core/
      so both transports report them identically
    - Response schemas never expose a password hash

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
