"""Utility module for SimpleFtp.

This module provides cross-cutting utilities:
- Logging: Configured logging with credential redaction
- Validators: Argument validation for servers, names and streams
- Threading: Background task helper for non-blocking operations
"""
