"""JSON decoding that reports failure as None instead of raising."""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

import orjson

logger = logging.getLogger(__name__)

JsonText = Union[str, bytes, bytearray, memoryview]


def parse_json(payload: JsonText) -> Optional[Any]:
    """
    Decode a JSON document.

    Args:
        payload: JSON text as str or bytes

    Returns:
        The decoded value, or None if the payload is not valid JSON
    """
    try:
        return orjson.loads(payload)
    except (orjson.JSONDecodeError, TypeError) as exc:
        logger.debug("Payload is not valid JSON: %s", exc)
        return None


def parse_json_container(payload: JsonText) -> Optional[Union[dict, list]]:
    """Decode a JSON document, keeping the result only when it is an object or array."""
    decoded = parse_json(payload)
    if isinstance(decoded, (dict, list)):
        return decoded
    return None


__all__ = ["JsonText", "parse_json", "parse_json_container"]
