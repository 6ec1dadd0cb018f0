"""Domain-level exceptions.

Every failure the discount rule and its collaborators can report is a
subclass of DomainException so the CLI layer can catch them uniformly
and turn them into user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidCartError(ValidationError):
    """The cart cannot be evaluated (it has no lines)."""


class SchemaValidationError(ValidationError):
    """Host input does not match the expected shape."""

    def __init__(self, path: str, problem: str) -> None:
        super().__init__(f"Invalid input at '{path}': {problem}")
        self.path = path
        self.problem = problem


class MissingTranslationError(DomainException):
    """A locale key was requested that the locale table does not define."""


class CustomerLookupError(DomainException):
    """The customer store could not be queried."""


class LocaleNotFoundError(DomainException):
    """No locale file exists for the requested locale name."""
