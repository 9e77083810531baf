"""
Centralized logging configuration using structlog
"""

import base64
import logging
import secrets
import sys
import time
from contextvars import ContextVar
from typing import Any

import structlog
from fastapi import Request

# Context variables for request tracking
request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
user_id_ctx: ContextVar[str | None] = ContextVar("user_id", default=None)


class RequestContextFilter:
    """Add request context to log records."""

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        # Suppress unused parameter warnings - these are required by structlog interface
        _ = logger, method_name

        request_id = request_id_ctx.get()
        user_id = user_id_ctx.get()

        if request_id:
            event_dict["request_id"] = request_id

        if user_id:
            event_dict["user_id"] = user_id

        return event_dict


def configure_logging(debug: bool = False) -> None:
    """Configure structlog with appropriate processors and formatters.

    Args:
        debug: If True, use human-readable console output. If False, use JSON.
    """
    # Determine log level
    log_level = logging.DEBUG if debug else logging.INFO

    # Configure stdlib logging
    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    # Configure structlog processors
    processors = [
        # Drop events below the configured level
        structlog.stdlib.filter_by_level,
        # Add logger name to event dict
        structlog.stdlib.add_logger_name,
        # Add log level to event dict
        structlog.stdlib.add_log_level,
        # Add request context
        RequestContextFilter(),
        # Add timestamp
        structlog.processors.TimeStamper(fmt="ISO", utc=True),
        # Perform %-style string formatting
        structlog.stdlib.PositionalArgumentsFormatter(),
        # Stack info processor (for exceptions)
        structlog.processors.StackInfoRenderer(),
        # Exception info processor
        structlog.processors.format_exc_info,
        # Unicode decoder processor
        structlog.processors.UnicodeDecoder(),
    ]

    if debug:
        # Development: human-readable console output
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        # Production: JSON output
        processors.append(structlog.processors.JSONRenderer())

    # Configure structlog
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Generate a compact request ID from a microsecond timestamp plus randomness.

    Format: 14-character URL-safe base64 string.
    """
    # Get microseconds since epoch (8 bytes when encoded as int64)
    timestamp_us = int(time.time() * 1_000_000)

    # Add 2 bytes of cryptographically secure randomness
    random_bytes = secrets.token_bytes(2)

    # Encode as base64 and strip padding
    combined_bytes = timestamp_us.to_bytes(8, byteorder="big") + random_bytes
    return base64.urlsafe_b64encode(combined_bytes).decode("ascii").rstrip("=")


def set_request_context(request_id: str | None = None, user_id: str | None = None) -> None:
    """Set request context variables.

    Args:
        request_id: Request ID to set (generates one if None)
        user_id: User ID to set
    """
    if request_id is None:
        request_id = generate_request_id()

    request_id_ctx.set(request_id)
    if user_id is not None:
        user_id_ctx.set(user_id)


def clear_request_context() -> None:
    """Clear request context variables."""
    request_id_ctx.set(None)
    user_id_ctx.set(None)


def get_request_id() -> str | None:
    """Get the current request ID."""
    return request_id_ctx.get()


def get_user_id() -> str | None:
    """Get the current user ID."""
    return user_id_ctx.get()


def extract_user_id_from_request(request: Request) -> str | None:
    """Extract the caller's user ID from the ``X-User-Id`` header, if present."""
    user_id = request.headers.get("x-user-id")
    return user_id or None
