from __future__ import annotations
from bitpacket.errors import InvalidHexDigit

# One 4-bit group per hex digit, MSB first
_HEX_TO_BITS = {d: format(i, "04b") for i, d in enumerate("0123456789ABCDEF")}

def to_bits(hex_string: str) -> str:
    """
    Expand a hex message into its bit sequence.
    Digits are case-insensitive; anything else (whitespace included) is rejected.
    """
    out = []
    for idx, ch in enumerate(hex_string):
        group = _HEX_TO_BITS.get(ch.upper())
        if group is None:
            raise InvalidHexDigit(f"invalid hex digit {ch!r} at index {idx}")
        out.append(group)
    return "".join(out)

def from_bits(bits: str) -> str:
    """Render a bit sequence as upper-case hex, zero-padding the tail to a whole digit."""
    if bits.strip("01"):
        raise ValueError("bit sequence may only contain '0' and '1'")
    pad = -len(bits) % 4
    bits += "0" * pad
    return "".join(format(int(bits[i:i + 4], 2), "X") for i in range(0, len(bits), 4))
