"""Error taxonomy for unit normalization and equivalence upserts."""


class PortionNormalizerError(Exception):
    """Base error for the normalizer."""


class ValidationError(PortionNormalizerError):
    """Raised when caller input is rejected before any store access."""


class InvalidUnitError(ValidationError):
    """Raised when a unit token is not in the recognized set."""

    def __init__(self, unit: str) -> None:
        self.unit = unit
        super().__init__(f"Unrecognized unit: {unit!r}")


class InvalidQuantityError(ValidationError):
    """Raised when a quantity is not a positive finite number."""

    def __init__(self, quantity: float) -> None:
        self.quantity = quantity
        super().__init__(
            f"Quantity must be a positive finite number, got {quantity}"
        )


class InvalidFactorError(ValidationError):
    """Raised when a declared factor is not a positive finite number."""

    def __init__(self, factor: float) -> None:
        self.factor = factor
        super().__init__(
            f"Conversion factor must be a positive finite number, got {factor}"
        )


class NotFoundError(PortionNormalizerError):
    """Raised when a referenced food or equivalence does not exist."""


class ConflictError(PortionNormalizerError):
    """Raised by the store when an insert collides with an existing key."""


class UpsertFailedError(PortionNormalizerError):
    """Raised when the single conflict recovery cycle could not converge."""


class StoreUnavailableError(PortionNormalizerError):
    """Raised when the underlying storage cannot be reached."""
