"""
HMAC-SHA256 request signing compatible with the Parcel Pro API.

The remote service concatenates the signed field values without any
delimiter and hashes the result with the account's API key. The field
order is fixed per operation and owned by the caller of ``Signer.sign``.
"""

import hashlib
import hmac
from typing import Any, Sequence

from .exceptions import ConfigurationError


def stringify(value: Any) -> str:
    """Render a field value the way the remote side concatenates it."""
    if value is None or value is False:
        return ''
    if value is True:
        return '1'
    return str(value)


class Signer:
    """
    Signs ordered field lists with the account API key.

    Holds no state besides the key, so one instance can be shared between
    threads.
    """

    def __init__(self, api_key: str):
        if not api_key:
            raise ConfigurationError("api_key cannot be empty")
        self._api_key = api_key

    def __repr__(self):
        return f"{type(self).__name__}(api_key='***')"

    def message(self, fields: Sequence[Any]) -> bytes:
        """Build the delimiter-free message that gets signed."""
        return ''.join(stringify(field) for field in fields).encode('utf-8')

    def sign(self, fields: Sequence[Any]) -> str:
        """
        Generate an HMAC-SHA256 signature over the ordered fields.

        Args:
            fields: Field values in the operation's signing order

        Returns:
            Hex-encoded HMAC signature
        """
        mac = hmac.new(
            self._api_key.encode('utf-8'),
            self.message(fields),
            hashlib.sha256
        )
        return mac.hexdigest()

