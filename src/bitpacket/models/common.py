from __future__ import annotations
from enum import IntEnum

class TypeId(IntEnum):
    SUM = 0
    PRODUCT = 1
    MINIMUM = 2
    MAXIMUM = 3
    LITERAL = 4
    GREATER_THAN = 5
    LESS_THAN = 6
    EQUAL_TO = 7

class LengthType(IntEnum):
    TOTAL_LENGTH = 0      # 15-bit budget of child bits
    SUBPACKET_COUNT = 1   # 11-bit number of children

# Field widths in bits
VERSION_BITS = 3
TYPE_ID_BITS = 3
LENGTH_TYPE_BITS = 1
TOTAL_LENGTH_BITS = 15
SUBPACKET_COUNT_BITS = 11
LITERAL_GROUP_BITS = 5   # 1 continuation flag + 4 value bits
LITERAL_NIBBLE_BITS = 4

COMPARISON_TYPES = frozenset({TypeId.GREATER_THAN, TypeId.LESS_THAN, TypeId.EQUAL_TO})
