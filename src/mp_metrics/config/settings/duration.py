"""Config settings – Go-style duration strings (``"1m30s"``, ``"500ms"``)."""
from __future__ import annotations

import math
import re

__all__ = ["parse_duration"]

_UNITS: dict[str, float] = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|ms|s|m|h)")


def parse_duration(text: str) -> float:
    """Return *text* as a number of seconds.

    Accepts a plain number (``"15"``, ``"2.5"``) or a sequence of
    number/unit pairs as understood by Go's ``time.ParseDuration``
    (``"1h"``, ``"1m30s"``, ``"250ms"``).  A leading ``-`` negates the
    whole value.

    Raises
    ------
    ValueError
        When *text* is empty or contains anything else.
    """
    raw = text.strip()
    if not raw:
        raise ValueError("empty duration")
    try:
        seconds = float(raw)
    except ValueError:
        pass
    else:
        if not math.isfinite(seconds):
            raise ValueError(f"invalid duration {text!r}")
        return seconds

    sign = 1.0
    body = raw
    if body[0] in "+-":
        sign = -1.0 if body[0] == "-" else 1.0
        body = body[1:]

    total = 0.0
    pos = 0
    for match in _PART.finditer(body):
        if match.start() != pos:
            break
        total += float(match.group(1)) * _UNITS[match.group(2)]
        pos = match.end()
    if pos == 0 or pos != len(body):
        raise ValueError(f"invalid duration {text!r}")
    return sign * total
