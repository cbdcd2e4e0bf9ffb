"""Shared building blocks: logging, Logfire monitoring and the database layer."""

from whatsms.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
