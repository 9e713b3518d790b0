"""Pytest configuration and shared fixtures for SimpleFtp tests."""

import io
from dataclasses import dataclass, field
from typing import List
from unittest.mock import MagicMock, patch

import pytest


# Test constants
TEST_FTP_SERVER = "ftp.example.com"
TEST_FTP_USER = "testuser"
TEST_FTP_PASS = "testpass"

KIB = 1024
MIB = 1024 * 1024


class RecordingWriter(io.BytesIO):
    """Writable data channel that keeps its content after close."""

    def __init__(self):
        super().__init__()
        self.data = b""
        self.flushed_at: List[int] = []

    def flush(self):
        if not self.closed:
            self.flushed_at.append(len(self.getvalue()))
        super().flush()

    def close(self):
        if not self.closed:
            self.data = self.getvalue()
        super().close()


class FakeDataConnection:
    """Stands in for the socket returned by FTP.transfercmd()."""

    def __init__(self):
        self.writer = RecordingWriter()
        self.closed = False

    def makefile(self, mode):
        assert mode == "wb"
        return self.writer

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.closed = True


@dataclass
class MockFTP:
    """Patched ftplib classes plus the data connections they handed out."""
    ftp_class: MagicMock
    ftp_tls_class: MagicMock
    ftp: MagicMock
    connections: List[FakeDataConnection] = field(default_factory=list)

    @property
    def uploaded(self) -> bytes:
        """Bytes written over the most recent data connection."""
        return self.connections[-1].writer.data


@pytest.fixture
def mock_ftp():
    """Patch ftplib in the connection module and record every transfer."""
    with patch("simple_ftp.ftp.connection.FTP") as ftp_class, \
            patch("simple_ftp.ftp.connection.FTP_TLS") as ftp_tls_class:
        ftp = MagicMock()
        ftp_class.return_value = ftp
        ftp_tls_class.return_value = ftp

        mocked = MockFTP(ftp_class=ftp_class, ftp_tls_class=ftp_tls_class, ftp=ftp)

        def fake_transfercmd(cmd, rest=None):
            connection = FakeDataConnection()
            mocked.connections.append(connection)
            return connection

        ftp.transfercmd.side_effect = fake_transfercmd
        ftp.voidresp.return_value = "226 Transfer complete."
        ftp.sendcmd.return_value = "213 20240101120000"
        ftp.delete.return_value = "250 File removed."
        yield mocked


@pytest.fixture
def service():
    """Provide an FtpService for the test server."""
    from simple_ftp.ftp.service import FtpService

    return FtpService(TEST_FTP_SERVER, TEST_FTP_USER, TEST_FTP_PASS)


@pytest.fixture
def temp_settings_file(tmp_path):
    """Provide a temporary settings file path for testing."""
    return tmp_path / "settings.json"
