"""
Read-only traversals over a decoded packet tree.

``version_sum`` is the structural statistic (every version field added up);
``value`` interprets the operators. Python integers are arbitrary precision, so
deeply nested products never overflow.
"""
from __future__ import annotations

import math
from typing import Callable, Dict, Iterator, List

from .errors import ArityViolation, InvalidTypeTag
from .models.common import COMPARISON_TYPES, TypeId
from .models.packet import Packet


def version_sum(packet: Packet) -> int:
    return packet.version + sum(version_sum(child) for child in packet.children)


def _minimum(values: List[int]) -> int:
    if not values:
        raise ArityViolation("minimum operator needs at least one sub-packet")
    return min(values)


def _maximum(values: List[int]) -> int:
    if not values:
        raise ArityViolation("maximum operator needs at least one sub-packet")
    return max(values)


_REDUCERS: Dict[int, Callable[[List[int]], int]] = {
    TypeId.SUM: sum,
    TypeId.PRODUCT: math.prod,
    TypeId.MINIMUM: _minimum,
    TypeId.MAXIMUM: _maximum,
    TypeId.GREATER_THAN: lambda v: int(v[0] > v[1]),
    TypeId.LESS_THAN: lambda v: int(v[0] < v[1]),
    TypeId.EQUAL_TO: lambda v: int(v[0] == v[1]),
}


def value(packet: Packet) -> int:
    """
    Evaluate a packet tree.

    Literals return their stored integer. Operators evaluate every child first
    and then reduce: 0 sum, 1 product, 2 min, 3 max, 5 greater-than,
    6 less-than, 7 equal-to (comparisons yield 1 or 0 and need exactly two
    children).
    """
    if packet.is_literal:
        return packet.literal

    reduce = _REDUCERS.get(packet.type_id)
    if reduce is None:
        raise InvalidTypeTag(f"no operator for type id {packet.type_id}")
    if packet.type_id in COMPARISON_TYPES and len(packet.children) != 2:
        raise ArityViolation(
            f"{TypeId(packet.type_id).name.lower()} operator needs exactly 2 sub-packets, "
            f"got {len(packet.children)}"
        )
    return reduce([value(child) for child in packet.children])


def iter_packets(packet: Packet) -> Iterator[Packet]:
    """Pre-order walk of the tree, root first."""
    stack = [packet]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def packet_count(packet: Packet) -> int:
    return sum(1 for _ in iter_packets(packet))


def max_depth(packet: Packet) -> int:
    """Nesting depth; a lone literal has depth 1."""
    depth = 0
    level = [packet]
    while level:
        depth += 1
        level = [child for node in level for child in node.children]
    return depth
