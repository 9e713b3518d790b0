"""FTP connection management for SimpleFtp.

Provides FTPConnectionConfig dataclass and FTPConnectionManager class.
Every service call opens its own manager, runs one exchange and
disconnects again.
"""

from dataclasses import dataclass
from ftplib import FTP, FTP_TLS
from typing import Callable, Optional, BinaryIO
import logging
import socket
import ssl

from simple_ftp.ftp.destination import DEFAULT_FTP_PORT
from simple_ftp.ftp.exceptions import FTPError, FTPValidationError
from simple_ftp.utils.validators import (
    validate_not_blank,
    validate_port,
    validate_proxy,
    validate_timeout,
)

logger = logging.getLogger("simple_ftp.connection")


@dataclass
class FTPConnectionConfig:
    """FTP connection configuration."""
    host: str
    port: int = DEFAULT_FTP_PORT
    username: str = "anonymous"
    passive_mode: bool = True
    enable_ssl: bool = False
    keep_alive: bool = True
    proxy: Optional[str] = None
    timeout: Optional[float] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        checks = [
            ("host", validate_not_blank(self.host, "Host")),
            ("port", validate_port(self.port)),
            ("proxy", validate_proxy(self.proxy)),
            ("timeout", validate_timeout(self.timeout)),
        ]
        for name, (is_valid, error) in checks:
            if not is_valid:
                raise FTPValidationError(name, error)

    @property
    def proxy_address(self) -> Optional[tuple[str, int]]:
        """Proxy (host, port) when a proxy is configured."""
        if self.proxy is None:
            return None
        host, sep, port = self.proxy.strip().rpartition(":")
        if not sep:
            return self.proxy.strip(), DEFAULT_FTP_PORT
        return host, int(port)

    @property
    def login_user(self) -> str:
        """
        User name sent with USER.

        Through a proxy the classic ``user@host`` form tells the proxy
        which server to relay to.
        """
        if self.proxy is None:
            return self.username
        if self.port != DEFAULT_FTP_PORT:
            return f"{self.username}@{self.host}:{self.port}"
        return f"{self.username}@{self.host}"


class FTPConnectionManager:
    """
    Manages the lifecycle of a single FTP control connection.

    Usage:
        with FTPConnectionManager(config, password) as connection:
            connection.delete("a.txt")
    """

    def __init__(self, config: FTPConnectionConfig, password: str = ""):
        """
        Initialize the connection manager.

        Args:
            config: Connection configuration
            password: FTP password
        """
        self._config = config
        self._password = password
        self._ftp: Optional[FTP] = None

    @property
    def config(self) -> FTPConnectionConfig:
        """Connection configuration."""
        return self._config

    @property
    def is_connected(self) -> bool:
        """True if currently connected."""
        return self._ftp is not None

    @property
    def ftp(self) -> FTP:
        """
        Get the underlying FTP object.

        Raises:
            FTPError: If not connected
        """
        if self._ftp is None:
            raise FTPError("FTP access requires an active FTP connection")
        return self._ftp

    def connect(self) -> None:
        """
        Establish the FTP connection and log in.

        Errors from ftplib and socket propagate unchanged. The half-open
        connection is closed before they do.
        """
        config = self._config
        ftp = FTP_TLS() if config.enable_ssl else FTP()

        host, port = config.proxy_address or (config.host, config.port)
        connect_kwargs = {"host": host, "port": port}
        if config.timeout is not None:
            connect_kwargs["timeout"] = config.timeout

        try:
            logger.debug(f"Connecting to {host}:{port} (ssl={config.enable_ssl})")
            ftp.connect(**connect_kwargs)

            if config.keep_alive and ftp.sock is not None:
                ftp.sock.setsockopt(socket.SOL_SOCKET, socket.SO_KEEPALIVE, 1)

            # FTP_TLS.login() negotiates AUTH TLS on the control channel
            ftp.login(user=config.login_user, passwd=self._password)

            if config.enable_ssl:
                ftp.prot_p()

            ftp.set_pasv(config.passive_mode)
        except BaseException:
            ftp.close()
            raise

        self._ftp = ftp

    def disconnect(self) -> None:
        """Close FTP connection gracefully."""
        if self._ftp:
            try:
                self._ftp.quit()
            except Exception as e:
                # Best effort close
                logger.debug(f"QUIT failed, closing socket: {e}")
                self._ftp.close()

        self._ftp = None

    def store(
        self,
        path: str,
        copy: Callable[[BinaryIO], None],
        use_binary: bool = True
    ) -> str:
        """
        Issue STOR and let ``copy`` write the file body.

        Args:
            path: Remote path relative to the login directory
            copy: Callable receiving a writable binary file on the data connection
            use_binary: Transfer type I when True, type A otherwise

        Returns:
            Final server reply
        """
        ftp = self.ftp
        ftp.voidcmd("TYPE I" if use_binary else "TYPE A")

        with ftp.transfercmd(f"STOR {path}") as conn:
            with conn.makefile("wb") as destination:
                copy(destination)
            if isinstance(conn, ssl.SSLSocket):
                conn.unwrap()

        return ftp.voidresp()

    def modification_time(self, path: str) -> str:
        """
        Issue MDTM for a remote file.

        Returns:
            Server reply, e.g. "213 20240101120000"

        Raises:
            ftplib.error_perm: If the file does not exist
        """
        return self.ftp.sendcmd(f"MDTM {path}")

    def delete(self, path: str) -> str:
        """
        Issue DELE for a remote file.

        Returns:
            Server reply
        """
        return self.ftp.delete(path)

    def __enter__(self) -> "FTPConnectionManager":
        """Context manager entry."""
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.disconnect()
