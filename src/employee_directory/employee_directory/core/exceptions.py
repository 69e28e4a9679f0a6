class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when request data is missing or malformed."""


class AuthenticationError(DomainError):
    """Raised when an identity token is rejected or the user is not allowed in."""


class TransportError(DomainError):
    """Raised when an outbound call to an identity provider fails at the network level."""
