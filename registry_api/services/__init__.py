"""Services Layer — the registry store adapter.

Invariants:
    - Services receive the SheetBook explicitly; no ambient sheet lookup
    - Pure decisions live in core/, services only sequence the IO around them
"""
