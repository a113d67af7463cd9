class DomainError(Exception):
    """Base class for rule violations reported back to the user."""


class ValidationError(DomainError):
    """Bad input, or an action the current state does not allow."""


class AuthenticationError(DomainError):
    """Unknown user, wrong password or wrong role at login."""


class AuthorizationError(DomainError):
    """Logged-in account may not perform the action."""


class StorageError(Exception):
    """The persistence backend could not read or write."""
