from __future__ import annotations
"""Lenient coercion of config-file values.

Config files are hand edited, so a bad entry should not stop generation: each
helper tries to read the value as a finite number and falls back to the
field's default otherwise, logging a warning that names the offending key.
Range checks happen later, in :meth:`GeneratorConfig.validate`.
"""

from typing import Any, Sequence, Tuple
import math
import logging

logger = logging.getLogger(__name__)


def to_int(value: Any, default: int = 0, key: str = "?") -> int:
    """Coerce ``value`` to ``int``; ``None`` silently gives ``default``."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        s = value.strip()
        if s and (s.isdigit() or (s[0] in {"+", "-"} and s[1:].isdigit())):
            return int(s)
    if value is None:
        return default
    logger.warning("config %s: coercing %r to default %r", key, value, default)
    return default


def to_float(value: Any, default: float = 0.0, key: str = "?") -> float:
    """Coerce ``value`` to a finite ``float``.

    Strings are parsed with ``float``; ``nan``/``inf`` and anything
    unparseable fall back to ``default`` with a warning.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        f = float(value)
        if math.isfinite(f):
            return f
    elif isinstance(value, str):
        try:
            f = float(value.strip())
        except ValueError:
            f = math.nan
        if math.isfinite(f):
            return f
    elif value is None:
        return default
    logger.warning("config %s: coercing %r to default %r", key, value, default)
    return default


def to_vec3(value: Any, default: Sequence[float] = (0.0, 0.0, 0.0),
            key: str = "?") -> Tuple[float, float, float]:
    """A scalar is broadcast to all three axes; lists must have 3 entries."""
    d = tuple(float(v) for v in default)
    if value is None:
        return d
    if isinstance(value, (int, float, str)) and not isinstance(value, bool):
        f = to_float(value, default=math.nan, key=key)
        if math.isfinite(f):
            return f, f, f
        return d
    if isinstance(value, (list, tuple)) and len(value) == 3:
        return tuple(to_float(v, default=dv, key=key) for v, dv in zip(value, d))
    logger.warning("config %s: coercing %r to default %r", key, value, d)
    return d
