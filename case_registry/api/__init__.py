"""HTTP API for Case Registry."""
