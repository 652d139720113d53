"""Errors raised while loading inputs, planning and reporting the pool."""


class RotationError(Exception):
    """Base exception for the IP rotation pool."""


class MissingRequiredInput(RotationError):
    """Raised when a required context value is absent outside destroy mode."""

    def __init__(self, missing):
        self.missing = tuple(missing)
        super().__init__(
            f"Missing required context parameters: {', '.join(self.missing)}"
        )


class RoleInvariantViolation(RotationError):
    """Raised when the role table does not hold exactly one of each role."""


class RoleNotFound(RotationError):
    """Raised when a role cannot be resolved to a single provisioned slot."""
