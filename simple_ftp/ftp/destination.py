"""Destination address handling for SimpleFtp.

Builds ``ftp://`` URIs from a configured server and a file name, and
splits them back into the host, port and path a request needs.
"""

from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote, unquote, urlsplit

from simple_ftp.ftp.exceptions import FTPValidationError
from simple_ftp.utils.validators import validate_not_blank


FTP_SCHEME = "ftp://"
DEFAULT_FTP_PORT = 21


@dataclass(frozen=True)
class FtpDestination:
    """Parsed destination of a single request."""
    uri: str
    host: str
    port: int
    path: str


def build_destination_uri(server: str, file_name: str) -> str:
    """
    Build the destination URI for a file on the server.

    The ftp scheme is prepended when the server does not already carry it
    (compared case-insensitively) and the file name is appended as a path
    segment. Characters URIs reserve (such as "#", "?" and "%") are
    percent-escaped in the file name so parse_destination_uri returns it
    unchanged.

    Args:
        server: Server host or ftp URI, e.g. "ftp.example.com"
        file_name: Remote file name, e.g. "a.txt"

    Returns:
        URI string, e.g. "ftp://ftp.example.com/a.txt"

    Raises:
        FTPValidationError: If server or file name is blank
    """
    for value, name in ((server, "server"), (file_name, "file_name")):
        is_valid, error = validate_not_blank(value, name)
        if not is_valid:
            raise FTPValidationError(name, error)

    escaped_name = quote(file_name, safe="/")

    if not server.lower().startswith(FTP_SCHEME):
        return f"{FTP_SCHEME}{server}/{escaped_name}"
    return f"{server}/{escaped_name}"


def parse_destination_uri(uri: str, default_port: Optional[int] = None) -> FtpDestination:
    """
    Split a destination URI into host, port and remote path.

    The path is returned relative to the login directory with percent
    escapes decoded, e.g. "ftp://host:2121/dir/a%20b.txt" gives host
    "host", port 2121 and path "dir/a b.txt".

    Args:
        uri: URI produced by build_destination_uri
        default_port: Port used when the URI has none (default 21)

    Returns:
        FtpDestination

    Raises:
        FTPValidationError: If the URI has no host or no path
    """
    parts = urlsplit(uri)

    if not parts.hostname:
        raise FTPValidationError("server", f"No host in destination URI: {uri}")

    try:
        port = parts.port
    except ValueError as e:
        raise FTPValidationError("server", f"Invalid port in destination URI: {uri} ({e})")

    path = unquote(parts.path).lstrip("/")
    if not path:
        raise FTPValidationError("file_name", f"No file path in destination URI: {uri}")

    return FtpDestination(
        uri=uri,
        host=parts.hostname,
        port=port or default_port or DEFAULT_FTP_PORT,
        path=path
    )
