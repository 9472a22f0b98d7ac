"""Services Layer - stores, plan lifecycle, router catalog and identity lookup.

Invariants:
    - Services orchestrate IO around the pure rules in core/
    - Routes construct services per request via FastAPI dependencies
"""
