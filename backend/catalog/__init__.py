"""Plan & Router Catalog Package - resource plans and router backends for the platform.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
