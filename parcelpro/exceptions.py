"""
Custom exceptions for the Parcel Pro client library.
"""


class ParcelProError(Exception):
    """Base exception for Parcel Pro client errors."""
    pass


class ConfigurationError(ParcelProError):
    """Raised when client configuration is invalid."""
    pass


class InputError(ParcelProError):
    """Raised when caller-supplied data lacks a required field."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"input data must contain the field: '{field}'")


class TransportError(ParcelProError):
    """Raised when the HTTP request itself fails (connection, DNS, TLS)."""
    pass


class RemoteError(ParcelProError):
    """Raised when the remote service answers with a non-success status."""

    def __init__(self, status_code: int, endpoint: str, message: str = None):
        self.status_code = status_code
        self.endpoint = endpoint
        if message is None:
            message = f"{endpoint} returned HTTP {status_code}"
        super().__init__(message)


class DecodeError(ParcelProError):
    """Raised when a response body is not valid JSON."""

    def __init__(self, endpoint: str):
        self.endpoint = endpoint
        super().__init__(f"could not decode JSON response from {endpoint}")


class FileError(ParcelProError):
    """Raised when a label cannot be written to disk."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(message)
