"""Caller identity passed explicitly to the access and case collaborators."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CallerIdentity:
    """The authenticated caller a registration session acts for.

    The role-check and case-creation collaborators receive this value as
    an argument; nothing in the workflow looks identity up globally.

    Attributes:
        user_id: Identifier of the caller in the case-management backend.
        access_token: Optional bearer token forwarded to the backend.
    """

    user_id: str
    access_token: str | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not self.user_id:
            raise ValueError("user_id must not be empty")
