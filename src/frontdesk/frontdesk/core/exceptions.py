class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when request data has the wrong shape or type."""


class NotFoundError(DomainError):
    """Raised when a referenced volunteer or employee does not exist."""


class SyncError(DomainError):
    """Raised inside the sync notifier when the webhook rejects a push.

    Never leaves the notifier.
    """
