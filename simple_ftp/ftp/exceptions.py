"""FTP-specific exceptions for SimpleFtp.

Only argument problems are raised as package exceptions. Transport and
protocol failures from ftplib and socket reach the caller unchanged.
"""


class FTPError(Exception):
    """Base exception for all SimpleFtp errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FTPValidationError(FTPError, ValueError):
    """An argument was blank, missing or otherwise unusable."""

    def __init__(self, argument: str, reason: str):
        self.argument = argument
        self.reason = reason
        message = f"Invalid argument '{argument}': {reason}"
        super().__init__(message)
