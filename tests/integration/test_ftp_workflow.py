"""Integration tests for the upload and delete workflow.

Runs FtpService against a local pyftpdlib server and checks the
results on the server's filesystem.
"""

import io
import time
from ftplib import error_perm

import pytest

from simple_ftp.ftp.service import FtpService
from simple_ftp.utils.threading import TaskStatus

from .mock_ftp_server import MockFTPServer

MIB = 1024 * 1024


@pytest.fixture
def ftp_server():
    """Provide a running mock FTP server."""
    server = MockFTPServer(port=21211)
    server.start()
    yield server
    server.stop()


@pytest.fixture
def ftp_service(ftp_server):
    """Provide a service pointed at the mock server."""
    service = FtpService(ftp_server.address, ftp_server.username, ftp_server.password)
    service.timeout = 10
    return service


def _wait_for_size(path, size, timeout=5.0):
    """Wait for the server to finish writing a file."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if path.exists() and path.stat().st_size == size:
            return
        time.sleep(0.02)


class TestUploadWorkflow:
    """Integration tests for uploads."""

    def test_upload_string(self, ftp_server, ftp_service):
        """A string arrives as its UTF-8 bytes."""
        content = "Hello from SimpleFtp ✓\n"

        ftp_service.upload_string(content, "hello.txt")

        uploaded = ftp_server.root_dir / "hello.txt"
        _wait_for_size(uploaded, len(content.encode("utf-8")))
        assert uploaded.read_bytes() == content.encode("utf-8")

    def test_upload_overwrites_existing(self, ftp_server, ftp_service):
        """STOR replaces an existing file."""
        ftp_server.add_file("report.csv", b"old,content\n")

        ftp_service.upload_string("new,content\n", "report.csv")

        uploaded = ftp_server.root_dir / "report.csv"
        _wait_for_size(uploaded, 12)
        assert uploaded.read_bytes() == b"new,content\n"

    def test_upload_into_base_path(self, ftp_server):
        """A base path on the server address is prefixed to the file name."""
        (ftp_server.root_dir / "incoming").mkdir()
        service = FtpService(
            f"ftp://{ftp_server.address}/incoming",
            ftp_server.username,
            ftp_server.password
        )

        service.upload_string("data", "a.txt")

        uploaded = ftp_server.root_dir / "incoming" / "a.txt"
        _wait_for_size(uploaded, 4)
        assert uploaded.read_bytes() == b"data"

    def test_upload_three_mib_with_progress(self, ftp_server, ftp_service):
        """3MB with a 1MB threshold reports three 1MB steps."""
        payload = bytes(range(256)) * (3 * MIB // 256)
        events = []
        ftp_service.progress_threshold = MIB
        ftp_service.on_upload_progress = events.append

        ftp_service.upload_stream(io.BytesIO(payload), "large.bin")

        assert len(events) == 3
        assert [e.event_id for e in events] == [1, 2, 3]
        assert all(e.current_bytes_uploaded == MIB for e in events)
        assert events[-1].total_bytes_uploaded == 3 * MIB
        assert events[-1].percent == 100.0

        uploaded = ftp_server.root_dir / "large.bin"
        _wait_for_size(uploaded, len(payload))
        assert uploaded.read_bytes() == payload

    def test_wrong_password(self, ftp_server):
        """A rejected login surfaces as error_perm."""
        service = FtpService(ftp_server.address, ftp_server.username, "wrongpassword")

        with pytest.raises(error_perm):
            service.upload_string("data", "a.txt")

        assert not (ftp_server.root_dir / "a.txt").exists()

    def test_upload_async(self, ftp_server, ftp_service):
        """The background variant completes its task."""
        result = ftp_service.upload_string_async("async", "async.txt").get_result(timeout=10)

        assert result.status == TaskStatus.COMPLETED
        uploaded = ftp_server.root_dir / "async.txt"
        _wait_for_size(uploaded, 5)
        assert uploaded.read_bytes() == b"async"


class TestDeleteWorkflow:
    """Integration tests for deletes."""

    def test_delete_existing_file(self, ftp_server, ftp_service):
        """An existing file is removed."""
        existing = ftp_server.add_file("old.txt")

        ftp_service.delete("old.txt")

        assert not existing.exists()

    def test_delete_missing_file(self, ftp_server, ftp_service):
        """Deleting a missing file succeeds quietly."""
        ftp_service.delete("never-uploaded.txt")

        assert list(ftp_server.root_dir.iterdir()) == []

    def test_upload_then_delete(self, ftp_server, ftp_service):
        """A freshly uploaded file can be deleted again."""
        ftp_service.upload_string("temporary", "temp.txt")
        _wait_for_size(ftp_server.root_dir / "temp.txt", 9)

        ftp_service.delete("temp.txt")

        assert not (ftp_server.root_dir / "temp.txt").exists()
