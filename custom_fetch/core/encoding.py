"""Query-string and url-encoded form encoding.

Key order follows the input mapping's insertion order. List values produce one
``key=value`` pair per element, in list order. Scalar values that are falsy
(``""``, ``0``, ``False``, ``None``) are dropped entirely; list elements are
always kept.
"""

from typing import List, Optional, Tuple
from urllib.parse import urlencode

from custom_fetch.types import RequestInput, RequestParams

# Browsers switch to exponent notation for whole numbers at and above 1e21.
_EXPONENT_THRESHOLD = 1e21


def stringify(value: RequestInput) -> str:
    """Textual form of a scalar as it appears on the wire.

    Booleans are lower-cased (``true``/``false``) and whole-number floats
    drop their fraction (``1.0`` -> ``1``) to match what browser clients send.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer() and abs(value) < _EXPONENT_THRESHOLD:
        return str(int(value))
    return str(value)


def search_params(data: Optional[RequestParams]) -> List[Tuple[str, str]]:
    """Flatten a params mapping into ordered ``(key, value)`` pairs."""
    pairs: List[Tuple[str, str]] = []
    if not data:
        return pairs
    for key, value in data.items():
        if isinstance(value, (list, tuple)):
            pairs.extend((key, stringify(item)) for item in value)
            continue
        if value:
            pairs.append((key, stringify(value)))
    return pairs


def encode_search_params(data: Optional[RequestParams]) -> str:
    """Encode a params mapping as ``application/x-www-form-urlencoded`` text."""
    return urlencode(search_params(data))


def build_query_string(data: Optional[RequestParams]) -> str:
    """Return ``?<encoded>``, or ``""`` when no pair survives encoding."""
    encoded = encode_search_params(data)
    return f"?{encoded}" if encoded else ""


def append_query_string(url: str, data: Optional[RequestParams]) -> str:
    """Append the encoded params to ``url``, leaving it untouched when empty."""
    query_string = build_query_string(data)
    if not query_string:
        return url
    if "?" in url:
        return f"{url}&{query_string[1:]}"
    return f"{url}{query_string}"
