"""
Shared fixtures for Parcel Pro client tests.
"""

import datetime
import hashlib
import hmac
from unittest.mock import Mock

import pytest

from parcelpro import ParcelProClient, Transport
from parcelpro.constants import BASE_URL

ACCOUNT_ID = 1234
API_KEY = "test-api-key"
FIXED_NOW = datetime.datetime(2024, 5, 1, 12, 30, 45)
FIXED_TIMESTAMP = "2024-05-01 12:30:45"


def expected_signature(message: str, key: str = API_KEY) -> str:
    """Reference HMAC computed straight from the concatenated message."""
    return hmac.new(key.encode('utf-8'), message.encode('utf-8'), hashlib.sha256).hexdigest()


class FakeTransport(Transport):
    """Transport that records outgoing requests instead of sending them."""

    def __init__(self, base_url=BASE_URL):
        super().__init__(base_url, session=Mock())
        self.calls = []
        self.response = {}

    def send(self, method, endpoint, payload=None, decode=True):
        self.calls.append({
            'method': method,
            'endpoint': endpoint,
            'payload': payload,
            'decode': decode,
        })
        return self.response if decode else None

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def client(transport):
    return ParcelProClient(ACCOUNT_ID, API_KEY, transport=transport, clock=lambda: FIXED_NOW)
