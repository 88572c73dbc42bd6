"""
Tracking QR codes

Repair and estimation slips can carry a QR code pointing at the job
identifier. The code image is generated by an external chart service;
this module builds its URL and fetches the PNG.
"""

import logging
from typing import Optional
from urllib.parse import quote

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from jewel_receipt.exceptions import NetworkError

logger = logging.getLogger(__name__)

QR_SERVICE_URL = "https://quickchart.io/qr"
DEFAULT_QR_SIZE = 200


def build_qr_url(identifier: str, size: int = DEFAULT_QR_SIZE, margin: int = 0) -> str:
    """
    Build the chart-service URL for a QR code

    Args:
        identifier: Text encoded in the code (repair or estimation number)
        size: Image edge in pixels
        margin: Quiet zone in modules

    Returns:
        Absolute image URL
    """
    text = quote(str(identifier), safe="")
    return f"{QR_SERVICE_URL}?text={text}&size={int(size)}&margin={int(margin)}"


class QrImageFetcher:
    """
    QrImageFetcher class
    Downloads QR images with connection pooling and retry

    Example:
        >>> fetcher = QrImageFetcher(timeout=5000)
        >>> png = fetcher.fetch("R-1042")
    """

    def __init__(
        self,
        timeout: int = 10000,
        retry_attempts: int = 2,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.timeout = timeout  # milliseconds
        self.retry_attempts = retry_attempts
        self._session = session or self._create_session()

    def _create_session(self) -> requests.Session:
        """Create requests session with a retrying adapter"""
        session = requests.Session()
        session.headers.update({"Accept": "image/png"})

        retry = Retry(
            total=self.retry_attempts,
            backoff_factor=0.5,
            status_forcelist=(500, 502, 503, 504),
            allowed_methods=("GET",),
        )
        adapter = HTTPAdapter(pool_connections=2, pool_maxsize=2, max_retries=retry)

        session.mount("http://", adapter)
        session.mount("https://", adapter)

        return session

    def fetch(self, identifier: str, size: int = DEFAULT_QR_SIZE) -> bytes:
        """
        Fetch the PNG for ``identifier``

        Raises:
            NetworkError: On timeout, connection failure or a non-image reply
        """
        url = build_qr_url(identifier, size=size)
        try:
            response = self._session.get(url, timeout=self.timeout / 1000.0)
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            raise NetworkError.timeout(f"QR request timed out: {url}") from e
        except requests.exceptions.ConnectionError as e:
            raise NetworkError.connection_refused(f"Connection error: {e}") from e
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise NetworkError(
                f"QR service returned HTTP {status}",
                status_code=status,
                retryable=status is not None and status >= 500,
            ) from e

        content_type = response.headers.get("Content-Type", "")
        if not content_type.startswith("image/"):
            raise NetworkError(
                f"QR service returned {content_type or 'no content type'}",
                status_code=response.status_code,
                network_code="NET11",
                retryable=False,
            )

        logger.debug("Fetched QR image for %s (%d bytes)", identifier, len(response.content))
        return response.content

    def close(self) -> None:
        self._session.close()
