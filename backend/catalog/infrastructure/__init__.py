"""Infrastructure Layer - database, configuration tree and logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Driver failures mapped to DatabaseError (core/errors.py)
"""
