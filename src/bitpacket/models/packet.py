from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Optional, Tuple
from .common import LengthType, TypeId

class Packet(BaseModel):
    model_config = ConfigDict(frozen=True)

    version: int = Field(..., ge=0, le=7)
    type_id: int = Field(..., ge=0, le=7)
    literal: Optional[int] = Field(default=None, ge=0)
    length_type: Optional[LengthType] = None
    children: Tuple[Packet, ...] = ()

    @model_validator(mode="after")
    def _check_body(self) -> "Packet":
        if self.type_id == TypeId.LITERAL:
            if self.literal is None:
                raise ValueError("literal packet needs a value")
            if self.children:
                raise ValueError("literal packet cannot have children")
            if self.length_type is not None:
                raise ValueError("literal packet has no length type")
        elif self.literal is not None:
            raise ValueError(f"operator packet (type {self.type_id}) cannot carry a literal value")
        return self

    @property
    def is_literal(self) -> bool:
        return self.type_id == TypeId.LITERAL

    # Convenience wrappers over the binary and evaluator layers
    @classmethod
    def from_hex(cls, hex_string: str) -> "Packet":
        from ..binary.reader import parse_message
        return parse_message(hex_string).packet

    def to_hex(self) -> str:
        from ..binary.writer import write_message
        return write_message(self)

    def version_sum(self) -> int:
        from ..evaluate import version_sum
        return version_sum(self)

    def value(self) -> int:
        from ..evaluate import value
        return value(self)


class DecodeResult(BaseModel):
    """Root packet of a message plus the bits left over after it."""
    model_config = ConfigDict(frozen=True)

    packet: Packet
    trailing_bits: int = Field(..., ge=0)
    padding_is_zero: bool = True

    @property
    def padding_is_nominal(self) -> bool:
        """Hex input leaves fewer than 4 zero bits behind a well-formed message."""
        return self.padding_is_zero and self.trailing_bits < 4
