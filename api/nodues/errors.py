class StoreError(Exception):
    """Base exception for record store failures."""


class NotFound(StoreError):
    """Raised when no record has the requested educator ID."""


class DuplicateKey(StoreError):
    """Raised when inserting a record whose educator ID already exists."""


class ValidationError(StoreError):
    """Raised when a record is missing a required field."""


class BackendUnavailable(StoreError):
    """Raised when the remote store cannot be reached or the query fails."""
