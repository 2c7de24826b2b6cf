# ABOUTME: Core exception classes for the property resolution library
# ABOUTME: Provides structured error handling with context and error codes

from typing import Dict, Any


class PropertyUtilException(Exception):
    """Base exception class for the property resolution library.

    Provides structured error handling with optional error codes and contextual
    details. All custom exceptions in the library inherit from this class
    to ensure consistent error handling patterns.

    Attributes:
        message: Human-readable error message
        code: Optional error code for programmatic handling
        details: Optional dictionary containing contextual information
    """

    def __init__(self, message: str, code: str | None = None, details: Dict[str, Any] | None = None):
        """Initialize PropertyUtilException with message, optional code and details.

        Args:
            message: Human-readable error message
            code: Optional error code for programmatic handling
            details: Optional dictionary containing contextual information
        """
        self.message = message
        self.code = code
        self.details = details.copy() if details else {}
        super().__init__(self.message)


class ValidationException(PropertyUtilException):
    """Exception raised for programmer errors in arguments.

    Used when a caller passes input that can never be valid, such as:
    - A missing or empty bundle name
    - A bundle name with empty dotted segments
    - A subdirectory that is not a string
    """

    pass


class ConfigurationException(PropertyUtilException):
    """Exception raised for configuration errors.

    Used when the library is asked to act on configuration it does not have,
    such as a process-wide holder that was never bound to a bundle name and
    has no default bundle name configured.
    """

    pass


class BundleNotFoundException(PropertyUtilException):
    """Exception raised when a lookup step finds no property bundle.

    Non-fatal: the bundle loader raises it from individual lookup steps and
    moves on to the next source. Details carry the step and the searched
    location.
    """

    def __init__(self, message: str, details: Dict[str, Any] | None = None):
        super().__init__(message, "BUNDLE_NOT_FOUND", details)


class PathIOException(PropertyUtilException):
    """Exception raised when a file system probe fails.

    Wraps OS-level errors (permissions, malformed paths, reading a directory)
    so that callers can treat the failing location as "not found".
    """

    def __init__(self, message: str, details: Dict[str, Any] | None = None):
        super().__init__(message, "PATH_IO_ERROR", details)


class PropertiesParseException(PropertyUtilException):
    """Exception raised when properties content cannot be parsed.

    Used for malformed ``\\uXXXX`` escapes and content that cannot be decoded
    with the configured encoding.
    """

    def __init__(self, message: str, details: Dict[str, Any] | None = None):
        super().__init__(message, "PROPERTIES_PARSE_ERROR", details)
