class VerlaxError(Exception):
    """Base exception for all application-specific errors."""

    pass


# --- 1. Errors related to loading and parsing the configuration file ---
class ConfigurationError(VerlaxError):
    """Base class for errors encountered while finding, reading, or parsing config files."""

    pass


class ConfigFileMissingError(ConfigurationError):
    """Raised when the configuration file cannot be found."""

    pass


class ConfigParsingError(ConfigurationError):
    """Raised when a YAML configuration file is syntactically incorrect."""

    pass


class ConfigValidationError(ConfigurationError):
    """Raised when the configuration fails structural validation (e.g., Pydantic)."""

    pass


# --- 2. Errors raised by the serialization adapters ---
class CodecError(VerlaxError):
    """Base class for errors in the encode/decode adapters around Version."""

    pass


class VersionDecodeError(CodecError, TypeError):
    """Raised when a well-formed document does not hold a version string."""

    pass
