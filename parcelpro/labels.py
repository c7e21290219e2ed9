"""
Shipping label retrieval.

Labels are downloaded from a signed URL. The download goes through a fresh
``requests.Session`` with its own cookie jar on every call, separate from the
session used for API calls, because the label endpoint keeps a cookie-based
session next to the signature check.
"""

import base64
import logging
import os

import requests
from requests.cookies import RequestsCookieJar

from .constants import ENDPOINT_LABEL, FIELD_ACCOUNT_ID, FIELD_SHIPMENT_ID, FIELD_SIGNATURE
from .exceptions import FileError, InputError, RemoteError, TransportError
from .signer import Signer
from .transport import Transport

logger = logging.getLogger(__name__)


class LabelFetcher:
    """Builds label URLs, downloads label contents and saves them to disk."""

    def __init__(self, account_id: int, signer: Signer, transport: Transport):
        self.account_id = account_id
        self.signer = signer
        self.transport = transport

    def get_label_url(self, shipment_id: str) -> str:
        """
        Build the signed download URL for a shipment label.

        The signature covers the account id followed by the shipment id.

        Args:
            shipment_id: Shipment identifier

        Returns:
            Fully qualified label URL
        """
        if shipment_id is None or shipment_id == '':
            raise InputError('shipment_id')

        signature = self.signer.sign([self.account_id, shipment_id])
        return self.transport.build_url(ENDPOINT_LABEL, {
            FIELD_ACCOUNT_ID: self.account_id,
            FIELD_SHIPMENT_ID: shipment_id,
            FIELD_SIGNATURE: signature,
        })

    def get_label_contents(self, shipment_id: str) -> str:
        """
        Download a shipment label.

        Args:
            shipment_id: Shipment identifier

        Returns:
            Base64-encoded label contents

        Raises:
            TransportError: If the download could not be performed
            RemoteError: If the label endpoint does not answer with 200
        """
        url = self.get_label_url(shipment_id)

        kwargs = {'cookies': RequestsCookieJar()}
        if self.transport.timeout is not None:
            kwargs['timeout'] = self.transport.timeout

        session = requests.Session()
        try:
            response = session.get(url, **kwargs)
        except requests.RequestException as e:
            logger.error("label download for shipment %s failed: %s", shipment_id, type(e).__name__)
            raise TransportError(
                f"failed to download label for shipment {shipment_id}: {type(e).__name__}"
            ) from e
        finally:
            session.close()

        if response.status_code != 200:
            logger.error("label download for shipment %s returned HTTP %s",
                         shipment_id, response.status_code)
            raise RemoteError(
                response.status_code,
                ENDPOINT_LABEL,
                f"failed to download label for shipment {shipment_id}: HTTP {response.status_code}"
            )

        return base64.b64encode(response.content).decode('ascii')

    def save_label(self, shipment_id: str, file_path: str) -> None:
        """
        Download a shipment label and write it to ``file_path``.

        The label is fetched before the destination is checked. The target
        directory must already exist; it is never created.

        Raises:
            TransportError: If the download could not be performed
            RemoteError: If the label endpoint does not answer with 200
            FileError: If the file cannot be written
        """
        contents = base64.b64decode(self.get_label_contents(shipment_id))

        directory = os.path.dirname(file_path) or os.curdir
        if not os.path.isdir(directory) or not os.access(directory, os.W_OK):
            raise FileError(file_path, f"file: {file_path} is not writable")

        try:
            handle = open(file_path, 'wb')
        except OSError as e:
            raise FileError(file_path, f"file: {file_path} could not be saved: {e}") from e

        try:
            with handle:
                handle.write(contents)
        except OSError as e:
            self._discard(file_path)
            raise FileError(file_path, f"file: {file_path} could not be saved: {e}") from e

        logger.info("saved label for shipment %s (%d bytes)", shipment_id, len(contents))

    @staticmethod
    def _discard(file_path: str):
        """Remove a partially written file."""
        try:
            os.remove(file_path)
        except OSError:
            logger.warning("could not remove partial label file %s", file_path)
