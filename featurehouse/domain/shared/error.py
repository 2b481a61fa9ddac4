"""Error hierarchy for featurehouse.

Error layers:
- FeaturehouseError: Base class for all featurehouse errors
- DomainError: Spec inconsistencies and validation failures
- InfrastructureError: Misconfiguration and system-level failures

Errors raised by the warehouse client itself are not part of this hierarchy.
They propagate to the caller unchanged.
"""


class FeaturehouseError(Exception):
    """Base class for all featurehouse errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors (spec inconsistencies, invalid arguments)
# =============================================================================


class DomainError(FeaturehouseError):
    """Base class for domain errors."""


class NotFoundError(DomainError):
    """Referenced spec not found."""


class ValidationError(DomainError):
    """Input validation failed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


# =============================================================================
# Infrastructure Errors (system-level failures)
# =============================================================================


class InfrastructureError(FeaturehouseError):
    """Base class for infrastructure/system errors."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
