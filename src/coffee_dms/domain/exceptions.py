"""Domain-level exceptions.

All errors the user should see are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

Duplicate or missing lot IDs are NOT errors: repositories report them as
``False`` / ``None`` and callers branch on the result.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A field or import line could not be parsed into a valid value."""


class InvalidCategory(ValidationError):
    """Text did not name a known roast level."""


class StorageError(DomainException):
    """The backing store failed or could not be reached."""


class ImportFileError(DomainException):
    """A bulk-import source file could not be read."""
