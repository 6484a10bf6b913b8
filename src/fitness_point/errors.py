"""Error types raised by FitnessPoint services."""


class FitnessPointError(Exception):
    """Base class for expected service errors."""


class ValidationError(FitnessPointError):
    """Raised when required input is missing or invalid."""


class ComputationError(FitnessPointError):
    """Raised when valid input cannot produce a meaningful result."""


class NotFoundError(FitnessPointError):
    """Raised when a requested record does not exist."""
