"""
Reference transports

``MemoryTransport`` keeps jobs in memory for previews and tests.
``FileTransport`` spools each job to its own file, ready to hand to an
OS raw-print queue.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional, Union

from jewel_receipt.exceptions import TransportError
from jewel_receipt.transport.base import WriteResult

logger = logging.getLogger(__name__)


class MemoryTransport:
    """Collects every job it is given"""

    def __init__(self) -> None:
        self.jobs: List[bytes] = []

    def write(self, data: bytes) -> WriteResult:
        self.jobs.append(bytes(data))
        return WriteResult.ok(len(data))

    @property
    def last_job(self) -> Optional[bytes]:
        return self.jobs[-1] if self.jobs else None

    def clear(self) -> None:
        self.jobs.clear()


class FileTransport:
    """
    FileTransport class
    Writes each job to a new file in a spool directory

    Args:
        directory: Spool directory (default: a ``jewel_receipts`` folder
            under the system temp directory)
        suffix: File extension for spooled jobs, e.g. ``.bin`` or ``.html``
    """

    def __init__(
        self,
        directory: Optional[Union[str, Path]] = None,
        suffix: str = ".bin",
        prefix: str = "receipt_",
    ) -> None:
        if directory is None:
            directory = Path(tempfile.gettempdir()) / "jewel_receipts"
        self.directory = Path(directory)
        self.suffix = suffix
        self.prefix = prefix
        self.paths: List[Path] = []

    def write(self, data: bytes) -> WriteResult:
        """
        Spool one job

        Raises:
            TransportError: If the spool directory cannot be created
        """
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise TransportError(
                f"Cannot create spool directory: {self.directory}",
                code="TRANSPORT02",
                cause=e,
            ) from e

        try:
            with tempfile.NamedTemporaryFile(
                dir=self.directory,
                prefix=self.prefix,
                suffix=self.suffix,
                delete=False,
            ) as tmp:
                tmp.write(data)
                path = Path(tmp.name)
        except OSError as e:
            logger.warning("Spooling print job to %s failed: %s", self.directory, e)
            return WriteResult.failed(str(e))

        self.paths.append(path)
        logger.debug("Spooled %d bytes to %s", len(data), path)
        return WriteResult.ok(os.path.getsize(path))
