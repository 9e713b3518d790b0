"""SimpleFtp: a small, injectable FTP upload/delete client.

Subpackages:
- ftp: FtpService, its interface, connection handling and progress events
- config: Persisted settings and keyring-backed credentials
- utils: Logging, validators and background task helpers
"""

__version__ = "1.0.0"
