"""Dependency wiring for Case Registry entry points (API and CLI)."""
