import pytest

from bitpacket.binary.codecs.hexcodec import to_bits
from bitpacket.binary.codecs.packet_codec import decode_bits
from bitpacket.errors import ArityViolation
from bitpacket.evaluate import iter_packets, max_depth, packet_count, value, version_sum
from bitpacket.models.common import TypeId
from bitpacket.models.packet import Packet

def _root(hex_string):
    return decode_bits(to_bits(hex_string)).packet

def lit(n, version=0):
    return Packet(version=version, type_id=TypeId.LITERAL, literal=n)

def op(type_id, *children, version=0):
    return Packet(version=version, type_id=type_id, children=children)

@pytest.mark.parametrize("hex_string, expected", [
    ("8A004A801A8002F478", 16),
    ("620080001611562C8802118E34", 12),
    ("C0015000016115A2E0802F182340", 23),
    ("A0016C880162017C3686B18A3D4780", 31),
])
def test_version_sum_reference(hex_string, expected):
    assert version_sum(_root(hex_string)) == expected

@pytest.mark.parametrize("hex_string, expected", [
    ("C200B40A82", 3),
    ("04005AC33890", 54),
    ("880086C3E88112", 7),
    ("CE00C43D881120", 9),
    ("D8005AC2A8F0", 1),
    ("F600BC2D8F", 0),
    ("9C005AC2F8F0", 0),
    ("9C0141080250320F1802104A08", 1),
])
def test_value_reference(hex_string, expected):
    assert value(_root(hex_string)) == expected

def test_version_sum_is_additive():
    tree = op(TypeId.SUM, lit(1, version=3), op(TypeId.MAXIMUM, lit(2, version=7), version=5), version=1)
    assert version_sum(tree) == 1 + 3 + 5 + 7
    assert version_sum(lit(9, version=6)) == 6

def test_operators():
    a, b, c = lit(4), lit(7), lit(4)
    assert value(op(TypeId.SUM, a, b, c)) == 15
    assert value(op(TypeId.PRODUCT, a, b, c)) == 112
    assert value(op(TypeId.MINIMUM, a, b, c)) == 4
    assert value(op(TypeId.MAXIMUM, a, b, c)) == 7
    assert value(op(TypeId.GREATER_THAN, b, a)) == 1
    assert value(op(TypeId.GREATER_THAN, a, b)) == 0
    assert value(op(TypeId.LESS_THAN, a, b)) == 1
    assert value(op(TypeId.LESS_THAN, a, c)) == 0
    assert value(op(TypeId.EQUAL_TO, a, c)) == 1
    assert value(op(TypeId.EQUAL_TO, a, b)) == 0

def test_single_child_reductions():
    assert value(op(TypeId.MINIMUM, lit(3))) == 3
    assert value(op(TypeId.PRODUCT, lit(3))) == 3

def test_product_does_not_overflow():
    big = lit((1 << 60) - 1)
    assert value(op(TypeId.PRODUCT, big, big, big)) == ((1 << 60) - 1) ** 3

def test_empty_sum_and_product():
    assert value(op(TypeId.SUM)) == 0
    assert value(op(TypeId.PRODUCT)) == 1

@pytest.mark.parametrize("type_id", [TypeId.MINIMUM, TypeId.MAXIMUM])
def test_empty_min_max(type_id):
    with pytest.raises(ArityViolation):
        value(op(type_id))

@pytest.mark.parametrize("type_id", [TypeId.GREATER_THAN, TypeId.LESS_THAN, TypeId.EQUAL_TO])
@pytest.mark.parametrize("arity", [0, 1, 3])
def test_comparison_arity(type_id, arity):
    with pytest.raises(ArityViolation):
        value(op(type_id, *[lit(i) for i in range(arity)]))

def test_arity_checked_below_root():
    tree = op(TypeId.SUM, lit(1), op(TypeId.EQUAL_TO, lit(1)))
    with pytest.raises(ArityViolation):
        value(tree)

def test_traversal_helpers():
    tree = op(TypeId.SUM, lit(1), op(TypeId.MAXIMUM, lit(2), lit(3)))
    walk = list(iter_packets(tree))
    assert walk[0] is tree
    assert [p.literal for p in walk if p.is_literal] == [1, 2, 3]
    assert packet_count(tree) == 5
    assert max_depth(tree) == 3
    assert max_depth(lit(0)) == 1

def test_packet_wrappers():
    root = Packet.from_hex("9C0141080250320F1802104A08")
    assert root.value() == 1
    assert root.version_sum() == version_sum(root)
