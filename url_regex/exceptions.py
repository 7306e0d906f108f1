"""Custom exceptions for the URL regex tool."""

import time


class UrlRegexError(Exception):
    """Base exception class for the URL regex tool."""

    def __init__(self, message: str, original_error: Exception = None):
        super().__init__(message)
        self.original_error = original_error
        self.timestamp = time.time()

    def __str__(self):
        base_msg = super().__str__()
        if self.original_error:
            return f"{base_msg} (Caused by: {type(self.original_error).__name__}: {str(self.original_error)})"
        return base_msg


class UrlParseError(UrlRegexError):
    """A candidate line could not be parsed as an absolute URL."""
    pass


class ClipboardError(UrlRegexError):
    """Error writing to or reading from the system clipboard."""
    pass


class ConfigurationError(UrlRegexError):
    """Error in application configuration."""
    pass
