"""Core workload and resource models."""
