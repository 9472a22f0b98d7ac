"""Permission Check - pure scope predicate evaluated before any catalog work.

Invariants:
    - has_permission() has no side effects and never does IO
    - A granted scope covers itself and every dotted descendant
    - The root scope "*" covers everything
"""

from catalog.core.domain_types import CallerIdentity, PermissionScope


def scope_covers(granted: str, required: str) -> bool:
    """True if `granted` is `required` or one of its dotted ancestors."""
    if granted == PermissionScope.ROOT.value:
        return True
    return required == granted or required.startswith(granted + ".")


def has_permission(identity: CallerIdentity, scope: str | PermissionScope) -> bool:
    required = scope.value if isinstance(scope, PermissionScope) else scope
    return any(scope_covers(granted, required) for granted in identity.scopes)
