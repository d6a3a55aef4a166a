"""Error hierarchy for Studio.

Error layers:
- StudioError: Base class for all Studio errors
- DomainError: Business rule violations, validation failures, access denials
- InfrastructureError: Local storage and remote store failures
"""


class StudioError(Exception):
    """Base class for all Studio errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors
# =============================================================================


class DomainError(StudioError):
    """Base class for domain/business errors."""


class NotFoundError(DomainError):
    """Resource not found."""


class ValidationError(DomainError):
    """Input validation failed.

    Form input is itemised per field in ``errors`` so it can be surfaced
    inline. ``field`` names the first failing field for single-value checks.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        errors: dict[str, str] | None = None,
    ) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.errors = dict(errors or {})
        if field is not None and field not in self.errors:
            self.errors[field] = message
        self.field = field or next(iter(self.errors), None)


class InvalidStateError(DomainError):
    """Operation not allowed in current state."""


class ConflictError(DomainError):
    """Resource already exists or version conflict."""


class AuthorizationError(DomainError):
    """Viewer not authorized for this operation."""


class StateInconsistencyError(DomainError):
    """Overlay references an id with no canonical or custom counterpart."""


# =============================================================================
# Infrastructure Errors
# =============================================================================


class InfrastructureError(StudioError):
    """Base class for infrastructure/system errors."""


class StorageQuotaError(InfrastructureError):
    """Local persistence write rejected (capacity exceeded or unwritable)."""


class RemoteOperationError(InfrastructureError):
    """A single upsert/read against the remote store failed."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
