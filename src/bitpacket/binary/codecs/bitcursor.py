from __future__ import annotations
from bitpacket.errors import OutOfBits

MAX_READ_WIDTH = 64

class BitCursor:
    """Forward-only reader over a string of '0'/'1' digits (MSB-first)."""
    __slots__ = ("bits", "pos", "limit")

    def __init__(self, bits: str):
        if bits.strip("01"):
            raise ValueError("bit sequence may only contain '0' and '1'")
        self.bits = bits
        self.pos = 0
        self.limit = len(bits)  # reads may not go past this offset

    def __len__(self) -> int: return len(self.bits)
    def remaining(self) -> int: return self.limit - self.pos
    def tell(self) -> int: return self.pos

    def fence(self, end: int) -> int:
        """Narrow the readable window to end at `end`; returns the previous limit for restoring."""
        if not (self.pos <= end <= self.limit): raise ValueError(f"fence {end} outside {self.pos}..{self.limit}")
        prev, self.limit = self.limit, end
        return prev

    def unfence(self, prev: int) -> None:
        if not (self.limit <= prev <= len(self.bits)): raise ValueError("unfence must widen the window")
        self.limit = prev

    def read(self, width: int) -> int:
        if not (0 < width <= MAX_READ_WIDTH): raise ValueError(f"read width 1..{MAX_READ_WIDTH}, got {width}")
        end = self.pos + width
        if end > self.limit:
            raise OutOfBits(f"need {width} bits at offset {self.pos}, only {self.remaining()} left")
        val = int(self.bits[self.pos:end], 2)
        self.pos = end
        return val

    def flag(self) -> bool: return self.read(1) == 1

    def peek_remaining_is_zero_padding(self) -> bool:
        return "1" not in self.bits[self.pos:self.limit]
