"""Configuration module for SimpleFtp.

This module handles client settings and credentials:
- SettingsManager: JSON-based settings persistence
- CredentialManager: Secure credential storage via keyring
- Paths: Platform config and log directories
- FtpSettings: Settings dataclass
"""
