from __future__ import annotations
import logging
from typing import List, Optional

from .bitcursor import BitCursor
from bitpacket.config import resolve_max_depth
from bitpacket.errors import MalformedSubpacketLength, OutOfBits, RecursionLimitExceeded
from bitpacket.models.common import (
    LengthType,
    TypeId,
    VERSION_BITS,
    TYPE_ID_BITS,
    LENGTH_TYPE_BITS,
    TOTAL_LENGTH_BITS,
    SUBPACKET_COUNT_BITS,
    LITERAL_GROUP_BITS,
    LITERAL_NIBBLE_BITS,
)
from bitpacket.models.packet import DecodeResult, Packet

logger = logging.getLogger(__name__)

_CONTINUE = 1 << LITERAL_NIBBLE_BITS
_NIBBLE = _CONTINUE - 1


def _decode_literal(cur: BitCursor) -> int:
    """Concatenate 4-bit nibbles until a group arrives with its continuation flag clear."""
    value = 0
    while True:
        group = cur.read(LITERAL_GROUP_BITS)
        value = (value << LITERAL_NIBBLE_BITS) | (group & _NIBBLE)
        if not group & _CONTINUE:
            return value


def _decode_by_length(cur: BitCursor, max_depth: int, depth: int) -> List[Packet]:
    total = cur.read(TOTAL_LENGTH_BITS)
    start = cur.tell()
    if total > cur.remaining():
        raise MalformedSubpacketLength(
            f"sub-packet budget of {total} bits at offset {start} exceeds the {cur.remaining()} bits left"
        )

    # Children only see their own budget; running out inside it means the budget was wrong.
    children: List[Packet] = []
    prev = cur.fence(start + total)
    try:
        while cur.remaining():
            children.append(decode_packet(cur, max_depth=max_depth, _depth=depth + 1))
    except OutOfBits as e:
        raise MalformedSubpacketLength(
            f"sub-packets starting at offset {start} overrun their {total} bit budget: {e}"
        ) from e
    finally:
        cur.unfence(prev)
    return children


def _decode_by_count(cur: BitCursor, max_depth: int, depth: int) -> List[Packet]:
    count = cur.read(SUBPACKET_COUNT_BITS)
    children: List[Packet] = []
    for _ in range(count):
        children.append(decode_packet(cur, max_depth=max_depth, _depth=depth + 1))
    return children


def decode_packet(cur: BitCursor, *, max_depth: Optional[int] = None, _depth: int = 1) -> Packet:
    """
    Decode one packet (and, recursively, its sub-packets) from the cursor.

    Header: version (3 bits), type id (3 bits). Type 4 is a literal made of
    5-bit groups; every other type is an operator whose children are framed
    either by a 15-bit bit budget (length type 0) or an 11-bit count (length
    type 1).

    `max_depth` caps the number of nesting levels, the root being level 1.
    """
    limit = resolve_max_depth(max_depth) if _depth == 1 else max_depth
    if _depth > limit:
        raise RecursionLimitExceeded(f"packet nesting deeper than {limit} levels at offset {cur.tell()}")

    start = cur.tell()
    version = cur.read(VERSION_BITS)
    type_id = cur.read(TYPE_ID_BITS)

    if type_id == TypeId.LITERAL:
        literal = _decode_literal(cur)
        logger.debug("literal v%d at bit %d: %d", version, start, literal)
        return Packet(version=version, type_id=type_id, literal=literal)

    length_type = LengthType(cur.read(LENGTH_TYPE_BITS))
    logger.debug("operator v%d type %d at bit %d, %s framing", version, type_id, start, length_type.name)
    if length_type is LengthType.TOTAL_LENGTH:
        children = _decode_by_length(cur, limit, _depth)
    else:
        children = _decode_by_count(cur, limit, _depth)

    return Packet(version=version, type_id=type_id, length_type=length_type, children=tuple(children))


def decode_bits(bits: str, *, max_depth: Optional[int] = None) -> DecodeResult:
    """Decode the single root packet of a message; whatever follows it is reported as trailing bits."""
    cur = BitCursor(bits)
    try:
        root = decode_packet(cur, max_depth=max_depth)
    except RecursionError as e:
        raise RecursionLimitExceeded(f"packet nesting exhausted the interpreter stack at offset {cur.tell()}") from e
    return DecodeResult(
        packet=root,
        trailing_bits=cur.remaining(),
        padding_is_zero=cur.peek_remaining_is_zero_padding(),
    )
