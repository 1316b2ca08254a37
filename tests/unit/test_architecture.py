"""Tests to verify the layered package structure."""

import ast
from pathlib import Path

import pytest

# Compute project root relative to this test file
PROJECT_ROOT = Path(__file__).parent.parent.parent


@pytest.fixture
def package_path() -> Path:
    """Return the case_registry package path."""
    return PROJECT_ROOT / "case_registry"


def _imported_modules(py_file: Path) -> list[str]:
    tree = ast.parse(py_file.read_text())
    modules: list[str] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.ImportFrom) and node.module:
            modules.append(node.module)
        elif isinstance(node, ast.Import):
            modules.extend(alias.name for alias in node.names)
    return modules


def test_main_layers_exist(package_path: Path) -> None:
    """Verify all main layer packages exist."""
    for layer in ["domain", "application", "infrastructure", "api", "config"]:
        assert (package_path / layer / "__init__.py").is_file(), (
            f"Missing {layer}/__init__.py"
        )


def test_domain_imports_only_domain(package_path: Path) -> None:
    """Domain is the innermost layer and imports no other package layer."""
    for py_file in (package_path / "domain").rglob("*.py"):
        for module in _imported_modules(py_file):
            if module.startswith("case_registry."):
                assert module.startswith("case_registry.domain"), (
                    f"{py_file} imports {module}"
                )


def test_application_has_no_outer_imports(package_path: Path) -> None:
    """Application may only reach infrastructure for observability."""
    forbidden = ("case_registry.api", "case_registry.bootstrap")
    for py_file in (package_path / "application").rglob("*.py"):
        for module in _imported_modules(py_file):
            assert not module.startswith(forbidden), f"{py_file} imports {module}"
            if module.startswith("case_registry.infrastructure"):
                assert module.startswith(
                    "case_registry.infrastructure.observability"
                ), f"{py_file} imports {module}"


def test_api_does_not_import_adapters(package_path: Path) -> None:
    """API wires adapters through bootstrap, never directly."""
    for py_file in (package_path / "api").rglob("*.py"):
        for module in _imported_modules(py_file):
            assert not module.startswith(
                "case_registry.infrastructure.adapters"
            ), f"{py_file} imports {module}"


def test_case_registry_error_importable_from_domain() -> None:
    from case_registry.domain import CaseRegistryError

    assert issubclass(CaseRegistryError, Exception)
    assert str(CaseRegistryError()) == ""
