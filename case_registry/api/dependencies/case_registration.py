"""Case registration API dependencies.

Thin FastAPI-facing accessors over the bootstrap singletons, so tests can
swap collaborators with the bootstrap set_* functions or FastAPI
dependency overrides.
"""

from case_registry.application.services.session_registry import (
    RegistrationSessionRegistry,
)
from case_registry.bootstrap.case_registration import (
    get_registration_config as _get_registration_config,
)
from case_registry.bootstrap.case_registration import (
    get_session_registry as _get_session_registry,
)
from case_registry.config.registration_config import RegistrationConfig


def get_session_registry() -> RegistrationSessionRegistry:
    """Get the registration session registry."""
    return _get_session_registry()


def get_registration_config() -> RegistrationConfig:
    """Get workflow configuration."""
    return _get_registration_config()
