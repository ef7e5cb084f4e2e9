"""Application pagination – BoundaryCodec, opaque signed cursor tokens."""

from __future__ import annotations

import base64
import hashlib
import hmac
import json
import uuid
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any

from keyset_pager.config.settings import PaginationSettings
from keyset_pager.kernel.errors import InvalidCursorError, ValidationError
from keyset_pager.kernel.ordering import Boundary, BoundaryDirection

_TAG = "$t"


def _encode_value(value: Any) -> Any:
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    # datetime is a date subclass, so it must be checked first.
    if isinstance(value, datetime):
        return {_TAG: "datetime", "v": value.isoformat()}
    if isinstance(value, date):
        return {_TAG: "date", "v": value.isoformat()}
    if isinstance(value, time):
        return {_TAG: "time", "v": value.isoformat()}
    if isinstance(value, uuid.UUID):
        return {_TAG: "uuid", "v": str(value)}
    if isinstance(value, Decimal):
        return {_TAG: "decimal", "v": str(value)}
    raise ValidationError(
        f"Cannot encode boundary value of type {type(value).__name__}",
        errors=[{"type": type(value).__name__}],
    )


_DECODERS = {
    "datetime": datetime.fromisoformat,
    "date": date.fromisoformat,
    "time": time.fromisoformat,
    "uuid": uuid.UUID,
    "decimal": Decimal,
}


def _decode_value(raw: Any) -> Any:
    if isinstance(raw, dict):
        return _DECODERS[raw[_TAG]](raw["v"])
    return raw


class BoundaryCodec:
    """Encode a boundary and its direction into a signed, URL-safe string.

    The token is ``base64(json | hmac)``; the signature is a truncated
    HMAC-SHA256 over the JSON payload, so tampered tokens are rejected.
    """

    def __init__(self, secret: str | bytes) -> None:
        self._secret = secret.encode() if isinstance(secret, str) else secret

    @classmethod
    def from_settings(cls, settings: PaginationSettings) -> "BoundaryCodec":
        """Codec signing with ``settings.cursor_secret``."""
        return cls(settings.cursor_secret)

    def _sign(self, payload: str) -> str:
        return hmac.new(self._secret, payload.encode(), hashlib.sha256).hexdigest()[:16]

    def encode(
        self,
        boundary: Boundary,
        direction: BoundaryDirection = BoundaryDirection.LOWER,
    ) -> str:
        payload = json.dumps(
            {
                "d": BoundaryDirection(direction).value,
                "b": [[field, _encode_value(value)] for field, value in boundary.items()],
            },
            separators=(",", ":"),
        )
        sig = self._sign(payload)
        return base64.urlsafe_b64encode(f"{payload}|{sig}".encode()).decode()

    def decode(self, token: str) -> tuple[dict[str, Any], BoundaryDirection]:
        """Decode *token* back to ``(boundary, direction)``.

        Raises ``InvalidCursorError`` for malformed or tampered tokens.
        """
        try:
            raw = base64.urlsafe_b64decode(token.encode()).decode()
            payload, sig = raw.rsplit("|", 1)
            if not hmac.compare_digest(sig, self._sign(payload)):
                raise InvalidCursorError("cursor signature mismatch")
            data = json.loads(payload)
            boundary = {field: _decode_value(value) for field, value in data["b"]}
            return boundary, BoundaryDirection(data["d"])
        except InvalidCursorError:
            raise
        except (ValueError, KeyError, TypeError, UnicodeDecodeError) as exc:
            raise InvalidCursorError("invalid cursor", cause=exc) from exc


__all__ = ["BoundaryCodec"]
