from __future__ import annotations

import re

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")

# keys are stored as BSON int64
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def parse_path_id(raw: str) -> int | None:
    """Parse the leading base-10 integer of a path segment.

    ``"42"`` and ``"42abc"`` both give ``42``; ``"abc"`` gives ``None``, which
    callers treat as an id that matches no document. So does an integer that
    does not fit in 64 bits, since no stored key can equal it.
    """

    match = _LEADING_INT_RE.match(raw or "")
    if not match:
        return None
    value = int(match.group(1))
    if not INT64_MIN <= value <= INT64_MAX:
        return None
    return value


__all__ = ["parse_path_id", "INT64_MIN", "INT64_MAX"]
