"""Domain exceptions."""


class RegistryError(Exception):
    """Base exception for docregistry."""

    pass


class Unauthorized(RegistryError):
    """Caller is not the administrator."""

    pass


class DuplicateDocument(RegistryError):
    """A uniqueness key of the document is already registered."""

    pass


class DuplicateLocator(DuplicateDocument):
    """Document with same locator already exists."""

    pass


class DuplicateTitle(DuplicateDocument):
    """Document with same title already exists."""

    pass


class NotFound(RegistryError):
    """Requested document was not found."""

    pass


class ValidationError(RegistryError):
    """Validation failed for input data."""

    pass
