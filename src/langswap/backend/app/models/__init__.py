"""Request and response models for the HTTP API."""

from .api import ResolveRequest, SelectionRequest, format_validation_error

__all__ = ["ResolveRequest", "SelectionRequest", "format_validation_error"]
