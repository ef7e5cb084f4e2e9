"""Observability – structlog configuration."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from keyset_pager.config.settings import PaginationSettings


class JsonLoggerFactory:
    """Configure structlog for JSON (or console) output on the root handler."""

    @staticmethod
    def configure(level: int | str = logging.INFO, *, json: bool = True) -> None:
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        renderer: Any = (
            structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level if isinstance(level, int) else level.upper())


def configure_logging(
    level: int | str | None = None,
    *,
    json: bool = True,
    settings: PaginationSettings | None = None,
) -> None:
    """Shortcut for :meth:`JsonLoggerFactory.configure`.

    An explicit *level* wins; otherwise ``settings.log_level`` is used, and
    ``INFO`` when neither is given.
    """
    if level is None:
        level = settings.log_level if settings is not None else logging.INFO
    JsonLoggerFactory.configure(level, json=json)


__all__ = ["JsonLoggerFactory", "configure_logging"]
