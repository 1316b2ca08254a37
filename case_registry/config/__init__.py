"""Configuration for Case Registry."""

from case_registry.config.registration_config import (
    DEFAULT_CASE_BACKEND_CONFIG,
    DEFAULT_REGISTRATION_CONFIG,
    TEST_REGISTRATION_CONFIG,
    CaseBackendConfig,
    RegistrationConfig,
)

__all__: list[str] = [
    "CaseBackendConfig",
    "DEFAULT_CASE_BACKEND_CONFIG",
    "DEFAULT_REGISTRATION_CONFIG",
    "RegistrationConfig",
    "TEST_REGISTRATION_CONFIG",
]
