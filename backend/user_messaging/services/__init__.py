"""Service Layer — store operations behind the HTTP routes.

Invariants:
    - Every function receives its AsyncSession; no module-level store handle
    - Every store call runs inside translate_db_errors()
"""
