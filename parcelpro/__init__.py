"""
Parcel Pro API client library

A Python client for the Parcel Pro shipment API. Every request is signed
with HMAC-SHA256 over the account id, a timestamp and operation fields.

Example usage:
    from parcelpro import ParcelProClient

    client = ParcelProClient(1234, "your-api-key")
    shipment = client.create_shipment({"Postcode": "1111AA", ...})
    client.save_label(shipment["Id"], "/path/to/label.pdf")
"""

import logging

from .client import ParcelProClient
from .exceptions import (
    ParcelProError,
    ConfigurationError,
    InputError,
    TransportError,
    RemoteError,
    DecodeError,
    FileError
)
from .labels import LabelFetcher
from .signer import Signer
from .transport import Transport
from .constants import (
    BASE_URL,
    DEFAULT_CONFIG,
    TIMESTAMP_FORMAT
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"
__all__ = [
    "ParcelProClient",
    "LabelFetcher",
    "Signer",
    "Transport",
    "ParcelProError",
    "ConfigurationError",
    "InputError",
    "TransportError",
    "RemoteError",
    "DecodeError",
    "FileError",
    "BASE_URL",
    "DEFAULT_CONFIG",
    "TIMESTAMP_FORMAT"
]
