"""Secure credential storage for SimpleFtp.

Uses the system keyring (Windows Credential Manager, macOS Keychain,
Linux Secret Service) to store FTP passwords, so that settings files
never hold them.
"""

from typing import Optional

import keyring
from keyring.errors import KeyringError


class CredentialManager:
    """Secure credential storage using system keyring."""

    SERVICE_NAME = "simple-ftp"

    def _make_key(self, server: str, username: str) -> str:
        """
        Create a unique key for the credential.

        Args:
            server: FTP server
            username: FTP username

        Returns:
            Unique key string
        """
        return f"{server}:{username}"

    def save_password(self, server: str, username: str, password: str) -> bool:
        """
        Save FTP password securely.

        Args:
            server: FTP server
            username: FTP username
            password: Password to save

        Returns:
            True if saved successfully, False otherwise
        """
        try:
            key = self._make_key(server, username)
            keyring.set_password(self.SERVICE_NAME, key, password)
            return True
        except KeyringError:
            return False

    def get_password(self, server: str, username: str) -> Optional[str]:
        """
        Retrieve saved password.

        Args:
            server: FTP server
            username: FTP username

        Returns:
            Password string or None if not found
        """
        try:
            key = self._make_key(server, username)
            return keyring.get_password(self.SERVICE_NAME, key)
        except KeyringError:
            return None

    def delete_password(self, server: str, username: str) -> bool:
        """
        Remove saved password.

        Args:
            server: FTP server
            username: FTP username

        Returns:
            True if deleted successfully, False otherwise
        """
        try:
            key = self._make_key(server, username)
            keyring.delete_password(self.SERVICE_NAME, key)
            return True
        except KeyringError:
            return False

    def has_password(self, server: str, username: str) -> bool:
        """True if a password is saved for server and username."""
        return self.get_password(server, username) is not None
