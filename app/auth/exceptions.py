class AuthError(Exception):
    """Base exception for registration and login failures."""


class ValidationError(AuthError):
    """Raised when a required field is missing or empty."""


class AlreadyExists(AuthError):
    """Raised when the phone is already registered for the role."""


class InvalidCredentials(AuthError):
    """Raised on login failure; the same message for unknown phone and bad password."""


class InternalFailure(AuthError):
    """Raised for unexpected failures that should reach the caller as a server error."""


class StoreUnavailable(InternalFailure):
    """Raised when the credential store cannot be read or written."""


class DuplicateKey(Exception):
    """Raised by a store partition when its unique phone index rejects an insert."""
