"""Caller identification for API requests."""

from case_registry.api.auth.caller_identity import get_caller_identity

__all__ = ["get_caller_identity"]
