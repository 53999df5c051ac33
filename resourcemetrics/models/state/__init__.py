"""Settings state models."""
