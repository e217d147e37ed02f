"""pagepath exception hierarchy.

Shared across the validator, config loader, and resolver so every module
raises and catches the same types.
"""


class PagePathError(Exception):
    """Base for all pagepath-specific errors."""


class ConfigurationError(PagePathError):
    """Raised when page creator configuration is invalid.

    Typically surfaced to the user at startup or when a path field is
    queried with an unusable argument.
    """


class ValidationError(ConfigurationError):
    """A queried file path is not an acceptable page source path.

    Raised by ``validate_path_query()`` before any path derivation.
    """
