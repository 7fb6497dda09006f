from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from .codecs.hexcodec import to_bits
from .codecs.packet_codec import decode_bits
from bitpacket.evaluate import max_depth as tree_depth, packet_count, value, version_sum
from bitpacket.models.packet import DecodeResult

HexSource = Union[str, Path, bytes, bytearray, memoryview]

logger = logging.getLogger(__name__)


# -----------------------------
# Helpers
# -----------------------------

def _load_hex(src: HexSource) -> str:
    """Inline hex strings pass through untouched; files and raw bytes yield their first line, trimmed."""
    if isinstance(src, str):
        return src
    if isinstance(src, (bytes, bytearray, memoryview)):
        text = bytes(src).decode("ascii", errors="replace")
    else:
        text = Path(src).read_text(encoding="ascii", errors="replace")
    lines = text.strip().splitlines()
    return lines[0].strip() if lines else ""


# -----------------------------
# Full parse
# -----------------------------

def parse_message(src: HexSource, *, max_depth: Optional[int] = None) -> DecodeResult:
    """
    Decode one hex-encoded message into its packet tree.
    `src` is a hex string, ASCII hex bytes, or a Path to a file whose first line holds the message.
    """
    hex_string = _load_hex(src)
    result = decode_bits(to_bits(hex_string), max_depth=max_depth)

    if not result.padding_is_zero:
        logger.warning("message has %d trailing bits that are not zero padding", result.trailing_bits)
    elif result.trailing_bits >= 4:
        logger.warning("message has %d trailing zero bits (expected fewer than 4)", result.trailing_bits)
    else:
        logger.debug("decoded %d hex digits, %d trailing bits", len(hex_string), result.trailing_bits)
    return result


def summarize_message(src: HexSource, *, max_depth: Optional[int] = None) -> dict:
    """Decode a message and report both statistics plus a few structural counts."""
    result = parse_message(src, max_depth=max_depth)
    root = result.packet
    return {
        "version_sum": version_sum(root),
        "value": value(root),
        "packet_count": packet_count(root),
        "depth": tree_depth(root),
        "trailing_bits": result.trailing_bits,
        "padding_is_zero": result.padding_is_zero,
    }
