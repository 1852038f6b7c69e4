"""
Custom exceptions for LayerPath.

All LayerPath exceptions inherit from LayerPathError for easy catching.
"""

from typing import Any


class LayerPathError(Exception):
    """Base exception for all LayerPath errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ConfigurationError(LayerPathError):
    """Raised when a slicing configuration is invalid or missing."""

    pass


class GeometryError(LayerPathError):
    """Raised when a solid model cannot be loaded or queried."""

    pass


class DegenerateModelError(GeometryError):
    """Raised when a model has no usable z extent (empty, inverted or non-finite bounds)."""

    pass


class SlicingError(LayerPathError):
    """Raised when the slicing collaborator fails at a given plane."""

    def __init__(
        self,
        message: str,
        z: float | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.z = z
