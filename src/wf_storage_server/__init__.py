"""Workflow storage service: JSON-LD storage actions in front of an S3-compatible object store."""

__version__ = "1.0.0"
