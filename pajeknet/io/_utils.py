from __future__ import annotations

import math
import re
import unicodedata
from collections.abc import Iterable, Iterator

# Spaces and tabs only; other whitespace belongs to the field.
_FIELD_DELIMITERS = re.compile(r"[ \t]+")
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

COMMENT_PREFIX = "/*"
MAX_DISPLAYED_LINE_LENGTH = 80
CONTROL_CHARACTER_REPLACEMENT = "\u25a1"


def iter_lines(stream: Iterable[str]) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, line)`` for every meaningful line of ``stream``.

    Lines are trimmed. Blank lines and lines starting with ``/*`` are skipped
    but still counted, so line numbers always match the physical input.
    """
    for line_number, raw in enumerate(stream, start=1):
        line = raw.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue
        yield line_number, line


def split_line(line: str) -> list[str]:
    return [t for t in _FIELD_DELIMITERS.split(line) if t]


def split_vertex_line(line: str) -> tuple[str, str, list[str]] | None:
    """Split a vertex record into ``(ordinal, name, remaining_fields)``.

    A name starting with a double quote runs to the next double quote and may
    contain whitespace. Without a closing quote the quote is an ordinary
    character and the name is the second field as-is.

    Returns ``None`` when the line has fewer than two fields.
    """
    fields = split_line(line)
    if len(fields) < 2:
        return None

    ordinal = fields[0]
    rest = line[line.index(ordinal) + len(ordinal):].lstrip(" \t")
    if rest.startswith('"'):
        close = rest.find('"', 1)
        if close != -1:
            return ordinal, rest[1:close], split_line(rest[close + 1:])
    return ordinal, fields[1], fields[2:]


def try_parse_int(token: str) -> int | None:
    if not _INT_PATTERN.fullmatch(token):
        return None
    value = int(token)
    if value < _INT32_MIN or value > _INT32_MAX:
        return None
    return value


def try_parse_float(token: str) -> float | None:
    if not _FLOAT_PATTERN.fullmatch(token):
        return None
    value = float(token)
    if not math.isfinite(value):
        return None
    return value


def try_parse_coordinates(fields: list[str]) -> tuple[float, float, float] | None:
    """Return ``(x, y, z)`` from the first three fields, or ``None``.

    ``None`` means the coordinates are absent or not all numeric, in which
    case the caller keeps the default location.
    """
    if len(fields) < 3:
        return None
    values = [try_parse_float(f) for f in fields[:3]]
    if any(v is None for v in values):
        return None
    return values[0], values[1], values[2]


def format_weight(weight: float) -> str:
    """Shortest decimal text for ``weight``: ``1``, ``5.11``, ``123.34``.

    Raises ``ValueError`` for ``nan`` and infinities, which the reader rejects.
    """
    w = float(weight)
    if not math.isfinite(w):
        raise ValueError(f"Edge weight {w!r} can't be written to a Pajek file.")
    if w.is_integer():
        return str(int(w))
    return repr(w)


def count_to_string(count: int) -> str:
    return f"{count:,} {'vertex' if count == 1 else 'vertices'}"


def line_for_display(line: str) -> str:
    if len(line) > MAX_DISPLAYED_LINE_LENGTH:
        line = line[:MAX_DISPLAYED_LINE_LENGTH] + "..."
    return "".join(
        CONTROL_CHARACTER_REPLACEMENT if unicodedata.category(ch) == "Cc" else ch for ch in line
    )
