"""
HTTP transport for the Parcel Pro API.

Sends signed payloads over one reusable ``requests.Session`` and decodes
JSON responses. Signing happens before the payload reaches this module.
"""

import logging
from typing import Any, Dict, Optional
from urllib.parse import urlencode, urljoin

import requests

from .constants import BASE_URL, DEFAULT_HEADERS
from .exceptions import ConfigurationError, DecodeError, RemoteError, TransportError
from .signer import stringify

logger = logging.getLogger(__name__)

BODY_METHODS = ('POST', 'PUT')


def query_params(payload: Dict[str, Any]) -> Dict[str, str]:
    """Render query values the way they are signed; None values are left out."""
    return {key: stringify(value) for key, value in payload.items() if value is not None}


class Transport:
    """
    Issues requests against a fixed base host.

    GET and DELETE payloads travel as query parameters, POST and PUT
    payloads as a JSON body. Failures are raised immediately; there is no
    retry.
    """

    def __init__(self, base_url: str = BASE_URL, timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        """
        Initialize transport.

        Args:
            base_url: Base URL for HTTP requests
            timeout: Per-request timeout in seconds, None for the requests default
            session: Existing session to reuse instead of creating one
        """
        if not base_url:
            raise ConfigurationError("base_url cannot be empty")

        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    def build_url(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> str:
        """Join an endpoint onto the base URL, optionally with a query string."""
        url = urljoin(self.base_url + '/', endpoint.lstrip('/'))
        if params:
            url = f"{url}?{urlencode(query_params(params))}"
        return url

    def send(self, method: str, endpoint: str, payload: Optional[Dict[str, Any]] = None,
             decode: bool = True) -> Any:
        """
        Send a request and decode the JSON response.

        Args:
            method: HTTP method
            endpoint: URL path (relative to base_url)
            payload: Request fields, sent as query or JSON body by method
            decode: Parse the body as JSON; when False the body is discarded

        Returns:
            Decoded JSON body, or None when decode is False

        Raises:
            TransportError: If the request could not be sent
            RemoteError: If the response status is not 2xx
            DecodeError: If the response body is not valid JSON
        """
        method = method.upper()
        url = self.build_url(endpoint)
        headers = dict(DEFAULT_HEADERS)
        kwargs = {'headers': headers}

        if payload is not None:
            if method in BODY_METHODS:
                headers['Content-Type'] = 'application/json'
                kwargs['json'] = payload
            else:
                kwargs['params'] = query_params(payload)

        if self.timeout is not None:
            kwargs['timeout'] = self.timeout

        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            # requests exceptions carry the signed URL
            logger.error("%s %s failed: %s", method, endpoint, type(e).__name__)
            raise TransportError(f"{method} {endpoint} failed: {type(e).__name__}") from e

        logger.debug("%s %s -> %s", method, endpoint, response.status_code)

        if not 200 <= response.status_code < 300:
            logger.error("%s %s returned HTTP %s", method, endpoint, response.status_code)
            raise RemoteError(response.status_code, endpoint)

        if not decode:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(endpoint) from e

    def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None, **kwargs) -> Any:
        """Send GET request."""
        return self.send('GET', endpoint, params, **kwargs)

    def post(self, endpoint: str, json: Optional[Dict[str, Any]] = None, **kwargs) -> Any:
        """Send POST request."""
        return self.send('POST', endpoint, json, **kwargs)

    def put(self, endpoint: str, json: Optional[Dict[str, Any]] = None, **kwargs) -> Any:
        """Send PUT request."""
        return self.send('PUT', endpoint, json, **kwargs)

    def delete(self, endpoint: str, params: Optional[Dict[str, Any]] = None, **kwargs) -> Any:
        """Send DELETE request."""
        return self.send('DELETE', endpoint, params, **kwargs)

    def close(self):
        """Close HTTP session."""
        if self.session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
