"""
Parcel Pro API client.

Every authenticated request carries the account id, a local timestamp and
an HMAC-SHA256 signature over an operation-specific, ordered list of field
values.
"""

import datetime
import os
from typing import Any, Callable, Dict, List, Optional, Sequence

from .constants import (
    DEFAULT_CONFIG,
    DEFAULT_TRIGGER_STATUS,
    ENDPOINT_ACCOUNT_EXISTS,
    ENDPOINT_CREATE_ACCOUNT,
    ENDPOINT_LABEL,
    ENDPOINT_PICKUP_POINTS,
    ENDPOINT_SHIPMENT,
    ENDPOINT_SHIPMENT_TYPES,
    ENDPOINT_SHIPMENTS,
    ENDPOINT_TRIGGERS,
    ENDPOINT_VALIDATE_API_KEY,
    ENV_ACCOUNT_ID,
    ENV_API_KEY,
    ENV_BASE_URL,
    FIELD_ACCOUNT_ID,
    FIELD_EMAIL,
    FIELD_NUMBER,
    FIELD_POSTCODE,
    FIELD_PRINT_PDF,
    FIELD_SENDER_POSTCODE,
    FIELD_SHIPMENT_ID,
    FIELD_SIGNATURE,
    FIELD_STREET,
    FIELD_TIMESTAMP,
    FIELD_TRIGGER_DATA,
    FIELD_TRIGGER_STATUS,
    FIELD_TRIGGER_URL,
    TIMESTAMP_FORMAT,
)
from .exceptions import ConfigurationError, InputError
from .labels import LabelFetcher
from .signer import Signer
from .transport import Transport


class ParcelProClient:
    """
    Client for the Parcel Pro shipment API.

    The client only holds the credentials and configuration; timestamps and
    signatures are computed per call, so an instance may be shared.
    """

    def __init__(self, account_id: int, api_key: str, transport: Optional[Transport] = None,
                 clock: Optional[Callable[[], datetime.datetime]] = None, **config):
        """
        Initialize Parcel Pro client.

        Args:
            account_id: Parcel Pro account (GebruikerId)
            api_key: API key used as HMAC secret, never sent over the wire
            transport: Transport to send requests with, built from config if omitted
            clock: Callable returning the current local datetime
            **config: Configuration options (base_url, timeout)
        """
        self.account_id = account_id

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}

        self._validate_config()

        self.signer = Signer(api_key)
        self.clock = clock or datetime.datetime.now
        if transport is None:
            transport = Transport(self.config['base_url'], timeout=self.config['timeout'])
        self.transport = transport
        self.labels = LabelFetcher(self.account_id, self.signer, self.transport)

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None, **kwargs) -> 'ParcelProClient':
        """
        Build a client from PARCELPRO_ACCOUNT_ID, PARCELPRO_API_KEY and the
        optional PARCELPRO_BASE_URL environment variables.
        """
        environ = os.environ if environ is None else environ

        raw_account_id = environ.get(ENV_ACCOUNT_ID)
        api_key = environ.get(ENV_API_KEY)
        if not raw_account_id or not api_key:
            raise ConfigurationError(f"{ENV_ACCOUNT_ID} and {ENV_API_KEY} must be set")

        try:
            account_id = int(raw_account_id)
        except ValueError as e:
            raise ConfigurationError(f"{ENV_ACCOUNT_ID} must be an integer") from e

        if environ.get(ENV_BASE_URL):
            kwargs.setdefault('base_url', environ[ENV_BASE_URL])

        return cls(account_id, api_key, **kwargs)

    def __repr__(self):
        return f"{type(self).__name__}(account_id={self.account_id}, base_url='{self.config['base_url']}')"

    def _validate_config(self):
        """Validate client configuration."""
        if isinstance(self.account_id, bool) or not isinstance(self.account_id, int):
            raise ConfigurationError("account_id must be an integer")

        if self.account_id <= 0:
            raise ConfigurationError("account_id must be positive")

        if not self.config['base_url']:
            raise ConfigurationError("base_url cannot be empty")

        timeout = self.config['timeout']
        if timeout is not None and timeout <= 0:
            raise ConfigurationError("timeout must be positive")

    def _timestamp(self) -> str:
        return self.clock().strftime(TIMESTAMP_FORMAT)

    @staticmethod
    def _check_required(fields: Sequence[str], data: Dict[str, Any]):
        """
        Check that every required field is present.

        Raises:
            InputError: naming the first missing field
        """
        for field in fields:
            if data.get(field) is None:
                raise InputError(field)

    def _signed(self, data: Optional[Dict[str, Any]], timestamp: str,
                fields: List[Any]) -> Dict[str, Any]:
        """Return a copy of data with account id, timestamp and signature merged in."""
        payload = dict(data or {})
        payload[FIELD_ACCOUNT_ID] = self.account_id
        payload[FIELD_TIMESTAMP] = timestamp
        payload[FIELD_SIGNATURE] = self.signer.sign(fields)
        return payload

    def validate_api_key(self) -> Any:
        """Check that the account id and API key are accepted."""
        timestamp = self._timestamp()
        payload = self._signed(None, timestamp, [self.account_id, timestamp])
        return self.transport.post(ENDPOINT_VALIDATE_API_KEY, payload)

    def create_account(self, data: Dict[str, Any]) -> Any:
        """
        Create a sub account.

        Args:
            data: Account fields, ``Email`` is required

        Returns:
            Created account record
        """
        self._check_required([FIELD_EMAIL], data)

        timestamp = self._timestamp()
        payload = self._signed(data, timestamp, [self.account_id, timestamp, data[FIELD_EMAIL]])
        return self.transport.post(ENDPOINT_CREATE_ACCOUNT, payload)

    def account_exists(self, email: str) -> Any:
        """Check whether an account with this e-mail address exists."""
        if not email:
            raise InputError('email')

        return self.transport.get(ENDPOINT_ACCOUNT_EXISTS, {
            FIELD_ACCOUNT_ID: self.account_id,
            FIELD_EMAIL: email,
            FIELD_SIGNATURE: self.signer.sign([self.account_id, email]),
        })

    def get_shipment_types(self) -> Any:
        """List the carrier/shipment type combinations available to the account."""
        timestamp = self._timestamp()
        payload = self._signed(None, timestamp, [self.account_id, timestamp])
        return self.transport.get(ENDPOINT_SHIPMENT_TYPES, payload)

    def get_pickup_points(self, data: Dict[str, Any]) -> Any:
        """
        Find pickup points near an address.

        Args:
            data: ``Postcode``, ``Nummer`` and ``Straat`` are required
        """
        self._check_required([FIELD_POSTCODE, FIELD_NUMBER, FIELD_STREET], data)

        timestamp = self._timestamp()
        payload = self._signed(data, timestamp, [
            self.account_id,
            timestamp,
            data[FIELD_POSTCODE],
            data[FIELD_NUMBER],
            data[FIELD_STREET],
        ])
        return self.transport.get(ENDPOINT_PICKUP_POINTS, payload)

    def create_shipment(self, data: Dict[str, Any]) -> Any:
        """
        Create a shipment.

        The sender postcode, when given, is signed before the destination
        postcode.

        Args:
            data: Shipment fields, ``Postcode`` is required

        Returns:
            Created shipment record
        """
        self._check_required([FIELD_POSTCODE], data)

        timestamp = self._timestamp()
        fields = [self.account_id, timestamp]
        if data.get(FIELD_SENDER_POSTCODE) is not None:
            fields.append(data[FIELD_SENDER_POSTCODE])
        fields.append(data[FIELD_POSTCODE])

        payload = self._signed(data, timestamp, fields)
        return self.transport.post(ENDPOINT_SHIPMENT, payload)

    def get_shipments(self, data: Optional[Dict[str, Any]] = None) -> Any:
        """
        List shipments.

        Args:
            data: Optional filter fields, e.g. ``ZendingId``
        """
        timestamp = self._timestamp()
        payload = self._signed(data, timestamp, [self.account_id, timestamp])
        return self.transport.get(ENDPOINT_SHIPMENTS, payload)

    def print_label(self, shipment_id: str, pdf: bool = True) -> None:
        """Mark a shipment label as printed; the response body is discarded."""
        if shipment_id is None or shipment_id == '':
            raise InputError('shipment_id')

        timestamp = self._timestamp()
        payload = self._signed({
            FIELD_SHIPMENT_ID: shipment_id,
            FIELD_PRINT_PDF: int(pdf),
        }, timestamp, [self.account_id, shipment_id])
        self.transport.get(ENDPOINT_LABEL, payload, decode=False)

    def create_trigger(self, url: str, status: str = DEFAULT_TRIGGER_STATUS, data: str = '') -> Any:
        """
        Register a webhook called when a shipment reaches ``status``.

        Args:
            url: Callback URL
            status: Shipment status that fires the trigger
            data: Query appended to the callback, e.g. ``ZendingId=?id&Status=Shipped``
        """
        if not url:
            raise InputError('url')

        timestamp = self._timestamp()
        payload = self._signed({
            FIELD_TRIGGER_STATUS: status,
            FIELD_TRIGGER_URL: url,
            FIELD_TRIGGER_DATA: data,
        }, timestamp, [self.account_id, timestamp])
        return self.transport.post(ENDPOINT_TRIGGERS, payload)

    def get_label_url(self, shipment_id: str) -> str:
        """Signed download URL for a shipment label."""
        return self.labels.get_label_url(shipment_id)

    def get_label_contents(self, shipment_id: str) -> str:
        """Base64-encoded label contents."""
        return self.labels.get_label_contents(shipment_id)

    def save_label(self, shipment_id: str, file_path: str) -> None:
        """Download a label and write it to ``file_path``."""
        self.labels.save_label(shipment_id, file_path)

    def close(self):
        """Close HTTP session."""
        self.transport.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
