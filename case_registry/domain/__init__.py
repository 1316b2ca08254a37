"""
Domain layer - Pure workflow logic for Case Registry.

This layer contains:
- Domain models (case draft, access state, lifecycle, notices)
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or api.
Only stdlib and typing imports are allowed.
"""

from case_registry.domain.exceptions import CaseRegistryError

__all__: list[str] = ["CaseRegistryError"]
