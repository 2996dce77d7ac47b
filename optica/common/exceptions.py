"""Exception hierarchy for optica."""


class OpticaError(Exception):
    """Base exception for all optica errors."""


class ConfigurationError(OpticaError):
    """Raised when required configuration is missing or invalid."""


class MigrationError(OpticaError):
    """Raised when a schema migration cannot be applied."""
