"""Application layer for Case Registry.

Ports describe the collaborators the workflow consumes (role check, case
creation, notice delivery, time, metrics). Services compose them into
the authorization-gated registration workflow.
"""
