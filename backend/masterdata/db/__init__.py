"""Database Infrastructure - declarative Base and audit columns.

Invariants:
    - Single async engine per process (initialized via init_db)
    - All sessions are async (AsyncSession)
"""
