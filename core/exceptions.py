# core/exceptions.py

class DomainError(Exception):
    """Base class for domain-level errors."""
    def __init__(self, message: str, *, code: str | None = None):
        super().__init__(message)
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised when input is empty, invalid or violates constraints."""


class NotFoundError(DomainError):
    """Raised when an entity is not found."""


class BusinessRuleError(DomainError):
    """Raised when business rules are violated."""


class GenerationError(DomainError):
    """Raised when the item generation service fails. The user may retry."""
    def __init__(self, message: str, *, code: str | None = None, retryable: bool = True):
        super().__init__(message, code=code)
        self.retryable = retryable


class PersistenceError(DomainError):
    """Raised when the saved budget list could not be written."""
