"""Input validators for SimpleFtp.

Provides validation functions for constructor and operation arguments
like server addresses, credentials, file names and source streams.
"""

from typing import Any, Optional, Tuple


def validate_not_blank(value: Optional[str], name: str) -> Tuple[bool, Optional[str]]:
    """
    Validate that a string is present and not only whitespace.

    Args:
        value: String to validate
        name: Human readable argument name used in the error

    Returns:
        Tuple of (is_valid, error_message)
    """
    if value is None:
        return False, f"{name} is required"

    if not isinstance(value, str):
        return False, f"{name} must be a string"

    if not value.strip():
        return False, f"{name} cannot be blank"

    return True, None


def validate_not_empty(value: Optional[str], name: str) -> Tuple[bool, Optional[str]]:
    """
    Validate that a string is present and non-empty.

    Whitespace-only content is accepted, unlike validate_not_blank.

    Args:
        value: String to validate
        name: Human readable argument name used in the error

    Returns:
        Tuple of (is_valid, error_message)
    """
    if value is None:
        return False, f"{name} is required"

    if not isinstance(value, str):
        return False, f"{name} must be a string"

    if value == "":
        return False, f"{name} cannot be empty"

    return True, None


def validate_port(port: int) -> Tuple[bool, Optional[str]]:
    """
    Validate a port number.

    Args:
        port: Port number to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not isinstance(port, int):
        try:
            port = int(port)
        except (ValueError, TypeError):
            return False, "Port must be a number"

    if port < 1 or port > 65535:
        return False, f"Port must be between 1 and 65535, got {port}"

    return True, None


def validate_timeout(timeout: Optional[float]) -> Tuple[bool, Optional[str]]:
    """
    Validate an optional timeout value in seconds.

    Args:
        timeout: Timeout in seconds, or None when unset

    Returns:
        Tuple of (is_valid, error_message)
    """
    if timeout is None:
        return True, None

    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
        return False, "Timeout must be a number"

    if timeout <= 0:
        return False, f"Timeout must be greater than 0 seconds, got {timeout}"

    return True, None


def validate_threshold(threshold: int) -> Tuple[bool, Optional[str]]:
    """
    Validate the progress event threshold in bytes.

    Args:
        threshold: Number of bytes between progress events

    Returns:
        Tuple of (is_valid, error_message)
    """
    if isinstance(threshold, bool) or not isinstance(threshold, int):
        return False, "Progress threshold must be an integer"

    if threshold < 1:
        return False, f"Progress threshold must be at least 1 byte, got {threshold}"

    return True, None


def validate_proxy(proxy: Optional[str]) -> Tuple[bool, Optional[str]]:
    """
    Validate an optional FTP proxy address in ``host[:port]`` form.

    Args:
        proxy: Proxy address, or None when unset

    Returns:
        Tuple of (is_valid, error_message)
    """
    if proxy is None:
        return True, None

    is_valid, error = validate_not_blank(proxy, "Proxy")
    if not is_valid:
        return False, error

    host, sep, port = proxy.strip().rpartition(":")
    if sep:
        if not host:
            return False, f"Invalid proxy address: {proxy}"
        if not port.isdigit():
            return False, f"Invalid proxy port: {port}"
        return validate_port(int(port))

    return True, None


def validate_source_stream(stream: Any) -> Tuple[bool, Optional[str]]:
    """
    Validate that a stream can be read and has a known length.

    Args:
        stream: Binary file-like object

    Returns:
        Tuple of (is_valid, error_message)
    """
    if stream is None:
        return False, "Stream is required"

    if not hasattr(stream, "read"):
        return False, "Stream must be a readable file-like object"

    if getattr(stream, "closed", False):
        return False, "Stream is closed"

    readable = getattr(stream, "readable", None)
    if readable is not None and not readable():
        return False, "Stream is not readable"

    seekable = getattr(stream, "seekable", None)
    if seekable is None or not seekable():
        return False, "Stream length is unknown (stream is not seekable)"

    return True, None
