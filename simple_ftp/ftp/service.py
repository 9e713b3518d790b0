"""FTP upload/delete service for SimpleFtp.

FtpService is bound to one server and one credential pair. Each call
opens its own connection, runs a single exchange and releases it.
"""

from ftplib import Error as FTPReplyError
from typing import TYPE_CHECKING, BinaryIO, Optional
import io
import logging
import time

from simple_ftp.ftp.connection import FTPConnectionConfig, FTPConnectionManager
from simple_ftp.ftp.destination import (
    FtpDestination,
    build_destination_uri,
    parse_destination_uri,
)
from simple_ftp.ftp.exceptions import FTPValidationError
from simple_ftp.ftp.interface import FtpServiceInterface
from simple_ftp.ftp.progress import (
    DEFAULT_PROGRESS_THRESHOLD,
    ProgressCallback,
    ProgressTracker,
)
from simple_ftp.utils.logging import get_logger
from simple_ftp.utils.validators import (
    validate_not_blank,
    validate_not_empty,
    validate_proxy,
    validate_source_stream,
    validate_threshold,
    validate_timeout,
)

if TYPE_CHECKING:
    from simple_ftp.config.credentials import CredentialManager
    from simple_ftp.config.settings import FtpSettings


def _require(result, argument: str) -> None:
    """Raise FTPValidationError for a failed validator result."""
    is_valid, error = result
    if not is_valid:
        raise FTPValidationError(argument, error)


class FtpService(FtpServiceInterface):
    """Uploads and deletes files on a single FTP server."""

    # Chunk size for copying the source stream (4KB)
    BLOCK_SIZE = 4 * 1024

    def __init__(
        self,
        server: str,
        username: str,
        password: str,
        logger: Optional[logging.Logger] = None,
        on_upload_progress: Optional[ProgressCallback] = None
    ):
        """
        Initialize the service.

        Args:
            server: Host name or ftp URI, optionally with a port and base path
            username: FTP username
            password: FTP password
            logger: Logger for trace output (default: package logger)
            on_upload_progress: Optional callback for upload progress events

        Raises:
            FTPValidationError: If server, username or password is blank
        """
        _require(validate_not_blank(server, "Server"), "server")
        _require(validate_not_blank(username, "Username"), "username")
        _require(validate_not_blank(password, "Password"), "password")

        self._server = server
        self._username = username
        self._password = password
        self._logger = logger or get_logger("simple_ftp.service")
        self.on_upload_progress = on_upload_progress

        # Defaults
        self.passive_mode = True
        self.enable_ssl = False
        self.keep_alive = True
        # TYPE I keeps uploads byte-exact; ASCII transfer is opt-in
        self.use_binary = True
        self._proxy: Optional[str] = None
        self._timeout: Optional[float] = None
        self._progress_threshold = DEFAULT_PROGRESS_THRESHOLD

    @classmethod
    def from_settings(
        cls,
        settings: "FtpSettings",
        password: Optional[str] = None,
        credentials: Optional["CredentialManager"] = None,
        logger: Optional[logging.Logger] = None,
        on_upload_progress: Optional[ProgressCallback] = None
    ) -> "FtpService":
        """
        Create a service from persisted settings.

        Args:
            settings: Saved server, username and flags
            password: Password to use; looked up in the keyring when None
            credentials: Credential store (default: system keyring)
            logger: Logger for trace output
            on_upload_progress: Optional callback for upload progress events

        Returns:
            Configured FtpService

        Raises:
            FTPValidationError: If no password is given or saved
        """
        if password is None:
            if credentials is None:
                from simple_ftp.config.credentials import CredentialManager
                credentials = CredentialManager()
            password = credentials.get_password(settings.server, settings.username)

        service = cls(
            settings.server,
            settings.username,
            password,
            logger=logger,
            on_upload_progress=on_upload_progress
        )
        service.passive_mode = settings.passive_mode
        service.enable_ssl = settings.enable_ssl
        service.keep_alive = settings.keep_alive
        service.use_binary = settings.use_binary
        service.proxy = settings.proxy
        service.timeout = settings.timeout
        service.progress_threshold = settings.progress_threshold
        return service

    @property
    def server(self) -> str:
        """Configured server address."""
        return self._server

    @property
    def username(self) -> str:
        """Configured FTP username."""
        return self._username

    @property
    def proxy(self) -> Optional[str]:
        """FTP proxy as ``host[:port]``, or None to connect directly."""
        return self._proxy

    @proxy.setter
    def proxy(self, value: Optional[str]) -> None:
        _require(validate_proxy(value), "proxy")
        self._proxy = value

    @property
    def timeout(self) -> Optional[float]:
        """Socket timeout in seconds, or None to use the ftplib default."""
        return self._timeout

    @timeout.setter
    def timeout(self, value: Optional[float]) -> None:
        _require(validate_timeout(value), "timeout")
        self._timeout = value

    @property
    def progress_threshold(self) -> int:
        """
        How many bytes need to be uploaded before a progress event is raised.

        The default is 1MB.
        """
        return self._progress_threshold

    @progress_threshold.setter
    def progress_threshold(self, value: int) -> None:
        _require(validate_threshold(value), "progress_threshold")
        self._progress_threshold = value

    def delete(self, file_name: str) -> None:
        """
        Delete a remote file from the ftp server.

        MDTM is sent first as an existence check. When the server rejects
        it the file is treated as absent and DELE is never sent.

        Args:
            file_name: The file to remove

        Raises:
            FTPValidationError: If file_name is blank
        """
        _require(validate_not_blank(file_name, "File name"), "file_name")

        destination = self._destination(file_name)

        with self._open_connection(destination) as connection:
            if self._file_exists(connection, destination):
                self._delete_file(connection, destination)

    def upload_string(self, content: str, file_name: str) -> None:
        """
        Upload string data to the ftp server as UTF-8.

        Args:
            content: The content to upload
            file_name: The destination file name

        Raises:
            FTPValidationError: If content or file_name is empty
        """
        _require(validate_not_empty(content, "Content"), "content")
        _require(validate_not_empty(file_name, "File name"), "file_name")

        # The upload plumbing works on streams
        with io.BytesIO(content.encode("utf-8")) as stream:
            self.upload_stream(stream, file_name)

    def upload_stream(self, stream: BinaryIO, file_name: str) -> None:
        """
        Upload a binary stream to the ftp server.

        The stream is read from its current position to the end and is
        left open.

        Args:
            stream: Readable, seekable binary stream
            file_name: The destination file name

        Raises:
            FTPValidationError: If the stream or file_name is unusable
        """
        self._logger.debug("upload_stream")

        _require(validate_source_stream(stream), "stream")
        _require(validate_not_empty(file_name, "File name"), "file_name")

        destination = self._destination(file_name)
        source_length = self._remaining_length(stream)

        self._logger.debug(
            f"Ftp uploading stream data -> destination: {destination.uri}. "
            f"Data size: {source_length}."
        )

        start_time = time.time()

        with self._open_connection(destination) as connection:
            tracker = ProgressTracker(
                source_length,
                threshold=self._progress_threshold,
                on_progress=self.on_upload_progress
            )
            connection.store(
                destination.path,
                lambda target: self._copy_with_progress(stream, target, tracker),
                use_binary=self.use_binary
            )

        duration = time.time() - start_time
        self._logger.info(
            f"Successfully ftp-uploaded {source_length:,} bytes to "
            f"{destination.uri} in {duration:.3f}s."
        )

    def _destination(self, file_name: str) -> FtpDestination:
        """Build and parse the destination for a file name."""
        return parse_destination_uri(build_destination_uri(self._server, file_name))

    def _connection_config(self, destination: FtpDestination) -> FTPConnectionConfig:
        """Snapshot the current flags into a connection config."""
        return FTPConnectionConfig(
            host=destination.host,
            port=destination.port,
            username=self._username,
            passive_mode=self.passive_mode,
            enable_ssl=self.enable_ssl,
            keep_alive=self.keep_alive,
            proxy=self._proxy,
            timeout=self._timeout
        )

    def _open_connection(self, destination: FtpDestination) -> FTPConnectionManager:
        """Create an unopened connection manager for a destination."""
        return FTPConnectionManager(self._connection_config(destination), self._password)

    @staticmethod
    def _remaining_length(stream: BinaryIO) -> int:
        """Number of bytes between the stream position and its end."""
        position = stream.tell()
        end = stream.seek(0, io.SEEK_END)
        stream.seek(position)
        return max(0, end - position)

    def _file_exists(
        self,
        connection: FTPConnectionManager,
        destination: FtpDestination
    ) -> bool:
        """Check for a remote file with MDTM."""
        self._logger.debug(
            f"Ftp checking if the remote file exists -> destination: {destination.uri}."
        )

        try:
            connection.modification_time(destination.path)
        except FTPReplyError as e:
            self._logger.info(f"Remote file doesn't exist - nothing to delete ({e}).")
            return False

        self._logger.info("Finished checking remote file which exists!")
        return True

    def _delete_file(
        self,
        connection: FTPConnectionManager,
        destination: FtpDestination
    ) -> None:
        """Send DELE for a remote file."""
        self._logger.debug(
            f"Ftp deleting a remote file -> destination: {destination.uri}."
        )
        connection.delete(destination.path)
        self._logger.info(f"Finished deleting remote file -> {destination.uri}.")

    def _copy_with_progress(
        self,
        source: BinaryIO,
        destination: BinaryIO,
        tracker: ProgressTracker
    ) -> None:
        """Copy source to destination in blocks, feeding the progress tracker."""
        while True:
            block = source.read(self.BLOCK_SIZE)
            if not block:
                break

            destination.write(block)
            tracker.record(len(block))

            if tracker.is_complete:
                destination.flush()
