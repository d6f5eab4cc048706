"""Logging configuration for grm.

Provides centralized logging with redaction of signed-URL secrets, so
download links handed out by release CDNs are never written to log files.
"""

import logging
import re
import sys
from pathlib import Path
from typing import Optional, Union


# Query-string secrets to redact from logs
SECRET_PATTERNS = [
    # Pre-signed storage URLs
    (re.compile(r'(X-Amz-(?:Signature|Credential|Security-Token)=)[^&\s\'"]+', re.IGNORECASE),
     r'\1[REDACTED]'),
    # Generic token and signature parameters
    (re.compile(r'([?&](?:token|access_token|sig|signature)=)[^&\s\'"]+', re.IGNORECASE),
     r'\1[REDACTED]'),
    # Credentials embedded in URLs
    (re.compile(r'(https?://)[^/\s:@]+:[^/\s@]+@'), r'\1[REDACTED]@'),
]


class SecretRedactingFormatter(logging.Formatter):
    """Custom formatter that redacts URL secrets from log messages."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record, redacting any secrets."""
        message = super().format(record)
        for pattern, replacement in SECRET_PATTERNS:
            message = pattern.sub(replacement, message)
        return message


def setup_logging(
    level: Union[int, str] = logging.WARNING,
    log_file: Optional[Path] = None,
    console: bool = True
) -> logging.Logger:
    """
    Configure application logging with secret redaction.

    Console output goes to stderr; stdout is reserved for user messages.

    Args:
        level: Logging level (default WARNING)
        log_file: Optional file path for log output
        console: Whether to output to console (default True)

    Returns:
        Configured logger instance
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger("grm")
    logger.setLevel(level)

    # Clear any existing handlers
    logger.handlers.clear()

    formatter = SecretRedactingFormatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "grm") -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (default is app logger)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
