"""
Print Transport Unit Tests
"""

from pathlib import Path

import pytest

from jewel_receipt.exceptions import TransportError
from jewel_receipt.transport import (
    FileTransport,
    MemoryTransport,
    PrintTransport,
    WriteResult,
)


class TestWriteResult:
    """Tests for WriteResult"""

    def test_ok(self):
        result = WriteResult.ok(12)
        assert result.success is True
        assert result.bytes_written == 12
        assert result.error is None

    def test_failed(self):
        result = WriteResult.failed("paper out")
        assert result.success is False
        assert result.error == "paper out"


class TestMemoryTransport:
    """Tests for MemoryTransport"""

    def test_collects_jobs(self):
        transport = MemoryTransport()
        transport.write(b"first")
        result = transport.write(b"second")

        assert transport.jobs == [b"first", b"second"]
        assert transport.last_job == b"second"
        assert result.bytes_written == 6

    def test_clear(self):
        transport = MemoryTransport()
        transport.write(b"job")
        transport.clear()
        assert transport.last_job is None

    def test_is_print_transport(self):
        assert isinstance(MemoryTransport(), PrintTransport)
        assert isinstance(FileTransport(), PrintTransport)


class TestFileTransport:
    """Tests for FileTransport"""

    def test_spools_each_job(self, tmp_path: Path):
        transport = FileTransport(tmp_path / "spool", suffix=".html")

        first = transport.write(b"<p>one</p>")
        transport.write(b"<p>two</p>")

        assert first.success is True
        assert first.bytes_written == 10
        assert len(transport.paths) == 2
        assert transport.paths[0] != transport.paths[1]
        assert transport.paths[0].suffix == ".html"
        assert transport.paths[0].read_bytes() == b"<p>one</p>"

    def test_unusable_directory(self, tmp_path: Path):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("x")
        transport = FileTransport(blocker / "spool")

        with pytest.raises(TransportError) as exc_info:
            transport.write(b"job")

        assert exc_info.value.code == "TRANSPORT02"
