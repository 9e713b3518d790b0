"""FTP operations module for SimpleFtp.

This module handles all FTP-related functionality:
- FtpServiceInterface: Injectable upload/delete contract
- FtpService: ftplib-backed implementation
- FTPConnectionManager: Per-call connection lifecycle
- UploadProgress: Progress events raised during stream uploads
- Exceptions: FTP-specific error types
"""

from .exceptions import FTPError, FTPValidationError
from .progress import UploadProgress, ProgressCallback, ProgressTracker
from .destination import build_destination_uri, parse_destination_uri
from .connection import FTPConnectionConfig, FTPConnectionManager
from .interface import FtpServiceInterface
from .service import FtpService

__all__ = [
    # Errors
    "FTPError",
    "FTPValidationError",
    # Progress
    "UploadProgress",
    "ProgressCallback",
    "ProgressTracker",
    # Destination
    "build_destination_uri",
    "parse_destination_uri",
    # Connection
    "FTPConnectionConfig",
    "FTPConnectionManager",
    # Service
    "FtpServiceInterface",
    "FtpService",
]
