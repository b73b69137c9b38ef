"""Database Infrastructure — SQLAlchemy Base for the spreadsheet tables.

Invariants:
    - Single async engine per process (initialized via init_db)
"""
