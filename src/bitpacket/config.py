"""
Runtime defaults for the bitpacket decoder.

Every nesting level of a message costs at least 18 header bits, so depth is
bounded by input size; the guard below keeps pathological inputs from running
into Python's own recursion limit first.

    from bitpacket.config import resolve_max_depth
    resolve_max_depth()      # env override or DEFAULT_MAX_DEPTH
    resolve_max_depth(32)    # explicit value wins
"""
from __future__ import annotations

import logging
import os
import sys
from typing import Optional

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Decoder limits
# ---------------------------------------------------------------------------

# Decoding and evaluation each spend about two interpreter frames per level.
DEFAULT_MAX_DEPTH: int = 256

MAX_DEPTH_ENV_VAR: str = "BITPACKET_MAX_DEPTH"

# Frames budgeted per nesting level, and frames held back for the caller's own stack.
FRAMES_PER_LEVEL: int = 3
RESERVED_FRAMES: int = 100


def depth_ceiling() -> int:
    """Deepest nesting the current interpreter recursion limit can decode safely."""
    return max(1, (sys.getrecursionlimit() - RESERVED_FRAMES) // FRAMES_PER_LEVEL)


def resolve_max_depth(value: Optional[int] = None) -> int:
    """
    Return the nesting limit to use: ``value`` if given, else the
    ``BITPACKET_MAX_DEPTH`` environment variable, else ``DEFAULT_MAX_DEPTH``.
    The result never exceeds ``depth_ceiling()``.
    """
    if value is None:
        raw = os.environ.get(MAX_DEPTH_ENV_VAR)
        if raw is None or not raw.strip():
            value = DEFAULT_MAX_DEPTH
        else:
            try:
                value = int(raw)
            except ValueError:
                raise ValueError(f"{MAX_DEPTH_ENV_VAR} must be an integer, got {raw!r}") from None

    if value < 1:
        raise ValueError(f"max depth must be positive, got {value}")

    ceiling = depth_ceiling()
    if value > ceiling:
        logger.warning("max depth %d exceeds the interpreter stack allowance, using %d", value, ceiling)
        return ceiling
    return value
