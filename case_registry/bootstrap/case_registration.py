"""Bootstrap wiring for case registration dependencies.

Collaborators come from the HTTP backend adapter when CASE_BACKEND_URL is
configured, and from in-memory stubs otherwise. A .env file in the
working directory is loaded before configuration is read.
"""

from __future__ import annotations

from dotenv import load_dotenv
from structlog import get_logger

from case_registry.application.ports.case_creation import CaseCreationProtocol
from case_registry.application.ports.registration_metrics import (
    RegistrationMetricsProtocol,
)
from case_registry.application.ports.role_checker import RoleCheckerProtocol
from case_registry.application.ports.time_authority import TimeAuthorityProtocol
from case_registry.application.services.case_registration_view import (
    CaseRegistrationView,
)
from case_registry.application.services.notice_board import NoticeBoard
from case_registry.application.services.session_registry import (
    RegistrationSessionRegistry,
)
from case_registry.application.services.time_authority_service import (
    TimeAuthorityService,
)
from case_registry.config.registration_config import (
    CaseBackendConfig,
    RegistrationConfig,
)
from case_registry.domain.models.caller_identity import CallerIdentity
from case_registry.infrastructure.adapters.case_backend_client import (
    CaseBackendClient,
)
from case_registry.infrastructure.monitoring.metrics import get_registration_metrics
from case_registry.infrastructure.stubs.case_creation_stub import CaseCreationStub
from case_registry.infrastructure.stubs.role_checker_stub import RoleCheckerStub

logger = get_logger()

_environment_loaded = False
_backend_config: CaseBackendConfig | None = None
_registration_config: RegistrationConfig | None = None
_backend_client: CaseBackendClient | None = None
_role_checker: RoleCheckerProtocol | None = None
_case_creator: CaseCreationProtocol | None = None
_time_authority: TimeAuthorityProtocol | None = None
_metrics: RegistrationMetricsProtocol | None = None
_session_registry: RegistrationSessionRegistry | None = None


def load_environment() -> None:
    """Load .env once per process. Existing variables win."""
    global _environment_loaded
    if not _environment_loaded:
        load_dotenv(override=False)
        _environment_loaded = True


def get_case_backend_config() -> CaseBackendConfig:
    """Get backend configuration."""
    global _backend_config
    if _backend_config is None:
        load_environment()
        _backend_config = CaseBackendConfig.from_environment()
    return _backend_config


def get_registration_config() -> RegistrationConfig:
    """Get workflow configuration."""
    global _registration_config
    if _registration_config is None:
        load_environment()
        _registration_config = RegistrationConfig.from_environment()
    return _registration_config


def _get_backend_client() -> CaseBackendClient:
    global _backend_client
    if _backend_client is None:
        config = get_case_backend_config()
        _backend_client = CaseBackendClient(config)
        logger.info(
            "case_backend_initialized",
            backend_type="HTTP",
            base_url=config.base_url,
            timeout_seconds=config.timeout_seconds,
        )
    return _backend_client


def get_backend_client() -> CaseBackendClient | None:
    """Get the HTTP backend client, or None when running on stubs."""
    if get_case_backend_config().uses_stubs:
        return None
    return _get_backend_client()


def get_role_checker() -> RoleCheckerProtocol:
    """Get role checker instance.

    Returns the HTTP adapter if CASE_BACKEND_URL is configured,
    otherwise an in-memory stub that grants every caller.
    """
    global _role_checker
    if _role_checker is None:
        if get_case_backend_config().uses_stubs:
            logger.warning(
                "role_checker_initialized",
                backend_type="InMemoryStub",
                message="CASE_BACKEND_URL not set - every caller is granted access",
            )
            _role_checker = RoleCheckerStub()
        else:
            _role_checker = _get_backend_client()
    return _role_checker


def get_case_creator() -> CaseCreationProtocol:
    """Get case creation instance.

    Returns the HTTP adapter if CASE_BACKEND_URL is configured,
    otherwise an in-memory stub (cases will not persist).
    """
    global _case_creator
    if _case_creator is None:
        if get_case_backend_config().uses_stubs:
            logger.warning(
                "case_creator_initialized",
                backend_type="InMemoryStub",
                message="CASE_BACKEND_URL not set - cases will not persist",
            )
            _case_creator = CaseCreationStub()
        else:
            _case_creator = _get_backend_client()
    return _case_creator


def get_time_authority() -> TimeAuthorityProtocol:
    """Get time authority instance."""
    global _time_authority
    if _time_authority is None:
        _time_authority = TimeAuthorityService()
    return _time_authority


def get_metrics() -> RegistrationMetricsProtocol:
    """Get registration metrics sink."""
    global _metrics
    if _metrics is None:
        _metrics = get_registration_metrics()
    return _metrics


def build_registration_view(identity: CallerIdentity) -> CaseRegistrationView:
    """Build a registration view for one caller from the wired collaborators."""
    config = get_registration_config()
    time_authority = get_time_authority()
    return CaseRegistrationView(
        role_checker=get_role_checker(),
        case_creator=get_case_creator(),
        identity=identity,
        notices=NoticeBoard(time_authority),
        time_authority=time_authority,
        notice_duration_ms=config.notice_duration_ms,
        metrics=get_metrics(),
    )


def get_session_registry() -> RegistrationSessionRegistry:
    """Get the registration session registry."""
    global _session_registry
    if _session_registry is None:
        config = get_registration_config()
        _session_registry = RegistrationSessionRegistry(
            view_factory=build_registration_view,
            time_authority=get_time_authority(),
            session_ttl_seconds=config.session_ttl_seconds,
            max_sessions=config.max_sessions,
        )
    return _session_registry


def reset_case_registration_dependencies() -> None:
    """Reset case registration dependency singletons."""
    global _backend_config
    global _registration_config
    global _backend_client
    global _role_checker
    global _case_creator
    global _time_authority
    global _metrics
    global _session_registry

    _backend_config = None
    _registration_config = None
    _backend_client = None
    _role_checker = None
    _case_creator = None
    _time_authority = None
    _metrics = None
    _session_registry = None


def set_case_backend_config(config: CaseBackendConfig) -> None:
    """Set custom backend config for testing."""
    global _backend_config
    _backend_config = config


def set_registration_config(config: RegistrationConfig) -> None:
    """Set custom workflow config for testing."""
    global _registration_config
    _registration_config = config


def set_role_checker(checker: RoleCheckerProtocol) -> None:
    """Set custom role checker for testing."""
    global _role_checker
    _role_checker = checker


def set_case_creator(creator: CaseCreationProtocol) -> None:
    """Set custom case creator for testing."""
    global _case_creator
    _case_creator = creator


def set_time_authority(time_authority: TimeAuthorityProtocol) -> None:
    """Set custom time authority for testing."""
    global _time_authority
    _time_authority = time_authority


def set_metrics(metrics: RegistrationMetricsProtocol) -> None:
    """Set custom metrics sink for testing."""
    global _metrics
    _metrics = metrics
