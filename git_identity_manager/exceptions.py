"""Custom exceptions for the Git identity manager."""


class IdentityManagerError(Exception):
    """Base exception for the Git identity manager."""

    def __init__(self, message: str, details: str | None = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class ConfigError(IdentityManagerError):
    """Errors related to the identities configuration file."""
    pass


class ConfigLoadError(ConfigError):
    """The configuration file could not be read or parsed."""
    pass


class ConfigSaveError(ConfigError):
    """The configuration file could not be written."""
    pass


class IdentityTableMissingError(ConfigError):
    """The configuration has no usable ``identities`` table."""
    pass


class IncompleteIdentityError(ConfigError):
    """A stored identity lacks its name or email."""

    def __init__(self, message: str, key: str | None = None) -> None:
        self.key = key
        super().__init__(message)


class InvalidSelectionError(IdentityManagerError):
    """The user picked something that is not a listed identity."""
    pass


class ApplyError(IdentityManagerError):
    """Errors raised while setting the Git identity."""
    pass
