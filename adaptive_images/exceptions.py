"""adaptive-images specific exceptions."""


class ConfigurationError(Exception):
    """Raised at startup when the resolver settings cannot be turned into a valid
    configuration.
    """

    pass


class MangledCookieError(ValueError):
    """Raised for resolution cookies whose width can't be parsed."""

    pass
