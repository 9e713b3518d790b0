"""Injectable FTP service contract for SimpleFtp.

Callers depend on FtpServiceInterface so that tests can substitute a
fake for the ftplib-backed FtpService.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO, Callable, Optional

from simple_ftp.utils.threading import TaskResult, ThreadedTask, run_in_background


CompletionCallback = Callable[[TaskResult[None]], None]


class FtpServiceInterface(ABC):
    """Upload and delete operations against one FTP server."""

    @abstractmethod
    def delete(self, file_name: str) -> None:
        """
        Delete a remote file from the ftp server.

        A file that does not exist is not an error.

        Args:
            file_name: The file to remove
        """

    @abstractmethod
    def upload_string(self, content: str, file_name: str) -> None:
        """
        Upload string data to the ftp server as UTF-8.

        Args:
            content: The content to upload
            file_name: The destination file name
        """

    @abstractmethod
    def upload_stream(self, stream: BinaryIO, file_name: str) -> None:
        """
        Upload a binary stream to the ftp server.

        Args:
            stream: Readable, seekable stream. It is not closed.
            file_name: The destination file name
        """

    def delete_async(
        self,
        file_name: str,
        on_complete: Optional[CompletionCallback] = None
    ) -> ThreadedTask[None]:
        """Run delete() on a worker thread."""
        return run_in_background(self.delete, file_name, on_complete=on_complete)

    def upload_string_async(
        self,
        content: str,
        file_name: str,
        on_complete: Optional[CompletionCallback] = None
    ) -> ThreadedTask[None]:
        """Run upload_string() on a worker thread."""
        return run_in_background(
            self.upload_string, content, file_name, on_complete=on_complete
        )

    def upload_stream_async(
        self,
        stream: BinaryIO,
        file_name: str,
        on_complete: Optional[CompletionCallback] = None
    ) -> ThreadedTask[None]:
        """Run upload_stream() on a worker thread."""
        return run_in_background(
            self.upload_stream, stream, file_name, on_complete=on_complete
        )
