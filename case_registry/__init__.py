"""
Case Registry - Authorization-gated case registration workflow

Lets a collector or admin register a new legal case with a case-management
backend. Access is resolved asynchronously before any form is offered,
required fields are checked locally, and each submission is single-flight
with user-facing notices for every outcome.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
