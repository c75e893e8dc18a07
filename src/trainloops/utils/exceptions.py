"""Custom exceptions for track enumeration."""


class TrainLoopsError(Exception):
    """Base exception for track enumeration errors."""


class ConfigurationError(TrainLoopsError):
    """Raised when piece parameters or angle settings are invalid."""


class InvalidInputError(TrainLoopsError):
    """Raised when a search is requested with an unsupported piece inventory."""


class LayoutError(TrainLoopsError):
    """Raised when a layout violates a track invariant or cannot be parsed."""
