"""ORM Models — SQLAlchemy declarative models for the backing spreadsheet.

Invariants:
    - All models inherit from Base (db/base.py)
    - Sheet is the aggregate root; rows are scoped by sheet_id

Design Decisions:
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs (ADR: standard SQLAlchemy pattern)
"""

from registry_api.models.sheet import Sheet, SheetRowModel  # noqa: F401
