"""Errors raised by catalog services."""


class CatalogValidationError(ValueError):
    """A request field set is incomplete or malformed.

    The message is safe to return to the caller as-is.
    """
