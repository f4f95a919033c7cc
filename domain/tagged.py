"""Unwrapping the remote service's tagged-value envelope.

The recommendation service hands back items straight out of its key-value
store, so a field can arrive as `"garlic"` or as `{"S": "garlic"}`. A list can
arrive as a real list, as `{"L": [{"S": "garlic"}]}`, as a string set
`{"SS": [...]}` or squashed into one delimited string under `S`.

Everything here is total: odd shapes come back as `None` / `[]` / the raw
value, never as an exception.
"""

from enum import Enum
from typing import Any


INGREDIENT_SEPARATOR = ", "
TAG_SEPARATOR = ", "
INSTRUCTION_SEPARATOR = ". "


class Tag(Enum):
    S = "S"
    N = "N"
    BOOL = "BOOL"
    NULL = "NULL"
    SS = "SS"
    NS = "NS"
    L = "L"
    M = "M"


TAGS = {t.value for t in Tag}


def envelope_tag(value: Any) -> Tag | None:
    if isinstance(value, dict) and len(value) == 1:
        (key,) = value
        if key in TAGS:
            return Tag(key)
    return None


def _number(raw: Any) -> Any:
    if not isinstance(raw, str):
        return raw
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        return raw


def unwrap(value: Any) -> Any:
    tag = envelope_tag(value)
    if tag is None:
        return value
    inner = value[tag.value]
    match tag:
        case Tag.S | Tag.BOOL:
            return inner
        case Tag.N:
            return _number(inner)
        case Tag.NULL:
            return None
        case Tag.SS:
            return list(inner) if isinstance(inner, list) else inner
        case Tag.NS:
            return [_number(i) for i in inner] if isinstance(inner, list) else inner
        case Tag.L:
            return [unwrap(i) for i in inner] if isinstance(inner, list) else inner
        case Tag.M:
            if isinstance(inner, dict):
                return {k: unwrap(v) for k, v in inner.items()}
            return inner


def as_text(value: Any) -> str | None:
    value = unwrap(value)
    match value:
        case None:
            return None
        case str():
            return value
        case bool():
            return str(value).lower()
        case int() | float():
            return str(value)
        case _:
            return None


def as_sequence(value: Any, separator: str) -> list[str]:
    value = unwrap(value)
    match value:
        case str():
            pieces = value.split(separator)
        case list() | tuple():
            pieces = [as_text(v) or "" for v in value]
        case _:
            return []
    return [p.strip() for p in pieces if p and p.strip()]
