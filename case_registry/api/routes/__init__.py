"""API routers for Case Registry."""
