"""FastAPI dependencies for Case Registry."""
