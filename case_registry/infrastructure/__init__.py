"""Infrastructure layer for Case Registry.

Adapters, in-memory stubs, observability and monitoring.
"""
