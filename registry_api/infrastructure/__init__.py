"""Infrastructure Layer — database access, the SQL sheet store, and logging setup.

Invariants:
    - Infrastructure implements core Protocols; core never imports from here
    - All SQLAlchemy failures mapped to DatabaseError
"""
