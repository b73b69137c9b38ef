"""Registry API Package — REST facade over a spreadsheet-backed registry.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
