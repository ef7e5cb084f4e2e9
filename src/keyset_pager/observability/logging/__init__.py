"""Observability – structured logging helpers."""
from keyset_pager.observability.logging.factory import JsonLoggerFactory, configure_logging
from keyset_pager.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "configure_logging", "get_logger"]
