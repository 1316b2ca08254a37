"""API request/response models for Case Registry."""
