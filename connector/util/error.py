"""Errors raised while wiring the application, before any request runs."""


class UtilError(Exception):
    """Base utility error."""


class ConfigurationError(UtilError):
    """Raised when settings are unusable for the current environment.

    Example: production started with the default JWT signing secret.
    """
