"""Config settings – Settings base class and PaginationSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from keyset_pager.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class PaginationSettings(Settings):
    """Tunables shared by every pagination adapter.

    ``parameter_prefix`` names bound parameters (``keyset_1``, ``keyset_2``...),
    ``boundary_label_prefix`` labels the boundary columns appended to the
    projection, and ``cursor_secret`` signs opaque cursor tokens.
    """

    _prefix: ClassVar[str] = "KEYSET_PAGER"

    parameter_prefix: str = "keyset"
    boundary_label_prefix: str = "keyset_boundary"
    cursor_secret: str = "change-me"
    log_level: str = "INFO"

    def _validate(self) -> None:
        for name in ("parameter_prefix", "boundary_label_prefix"):
            value = getattr(self, name)
            if not value.isidentifier():
                raise InvalidSettingValueError(name, value, "must be a valid identifier")
        if not self.cursor_secret:
            raise InvalidSettingValueError("cursor_secret", self.cursor_secret, "must not be empty")
        if logging.getLevelName(self.log_level.upper()) not in (
            logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL,
        ):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown log level")


__all__ = ["PaginationSettings", "Settings"]
