"""Role Checker Port.

Defines the contract for the external role-check collaborator. The
workflow asks exactly one question: may this caller register cases?
Only callers holding the collector or admin role may.

Implementations may raise with a human-readable message; the message is
surfaced to the caller as the reason access was denied.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from case_registry.domain.models.caller_identity import CallerIdentity


@runtime_checkable
class RoleCheckerProtocol(Protocol):
    """Protocol for resolving whether a caller may register cases.

    Usage:
        allowed = await role_checker.is_collector_or_admin(identity)
        if not allowed:
            ...
    """

    async def is_collector_or_admin(self, identity: CallerIdentity) -> bool:
        """Check whether the caller holds the collector or admin role.

        Args:
            identity: The caller whose roles are checked.

        Returns:
            True if the caller is a collector or an admin.

        Raises:
            Exception: Any failure to resolve roles. Its message is shown
                to the caller.
        """
        ...
