from __future__ import annotations
from typing import List, Optional

from .codecs.hexcodec import from_bits
from ..models.common import (
    LengthType,
    VERSION_BITS,
    TYPE_ID_BITS,
    TOTAL_LENGTH_BITS,
    SUBPACKET_COUNT_BITS,
    LITERAL_NIBBLE_BITS,
)
from ..models.packet import Packet

def _field(value: int, width: int) -> str:
    if value >= 1 << width:
        raise ValueError(f"{value} does not fit in {width} bits")
    return format(value, f"0{width}b")

def _encode_literal(value: int) -> str:
    nibbles: List[int] = []
    while True:
        nibbles.append(value & 0xF)
        value >>= LITERAL_NIBBLE_BITS
        if not value:
            break
    nibbles.reverse()
    last = len(nibbles) - 1
    return "".join(("0" if i == last else "1") + format(n, "04b") for i, n in enumerate(nibbles))

def encode_packet(packet: Packet, *, length_type: Optional[LengthType] = None) -> str:
    """
    Encode a packet tree as a bit string.
    `length_type` forces the framing of every operator; otherwise each operator keeps
    the framing it was decoded with, falling back to a sub-packet count.
    """
    head = _field(packet.version, VERSION_BITS) + _field(packet.type_id, TYPE_ID_BITS)
    if packet.is_literal:
        return head + _encode_literal(packet.literal)

    body = "".join(encode_packet(c, length_type=length_type) for c in packet.children)
    framing = length_type if length_type is not None else packet.length_type
    framing = LengthType.SUBPACKET_COUNT if framing is None else LengthType(framing)

    if framing is LengthType.TOTAL_LENGTH:
        return head + "0" + _field(len(body), TOTAL_LENGTH_BITS) + body
    return head + "1" + _field(len(packet.children), SUBPACKET_COUNT_BITS) + body

def write_message(packet: Packet, *, length_type: Optional[LengthType] = None) -> str:
    """Encode a packet tree as a hex message (trailing bits zero-padded)."""
    return from_bits(encode_packet(packet, length_type=length_type))
