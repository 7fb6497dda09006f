import logging

import pytest

from bitpacket.binary.reader import parse_message, summarize_message
from bitpacket.errors import InvalidHexDigit

def test_parse_inline_hex():
    result = parse_message("D2FE28")
    assert result.packet.literal == 2021
    assert result.trailing_bits == 3

def test_parse_from_file(tmp_path):
    f = tmp_path / "message.txt"
    f.write_text("C200B40A82\n", encoding="ascii")
    assert parse_message(f).packet.value() == 3

def test_parse_from_bytes():
    assert parse_message(b"D2FE28\n").packet.literal == 2021

def test_inline_hex_is_not_trimmed():
    with pytest.raises(InvalidHexDigit):
        parse_message("D2FE28\n")

def test_summary():
    s = summarize_message("9C0141080250320F1802104A08")
    assert s["value"] == 1
    assert s["version_sum"] == 20
    assert s["packet_count"] == 7
    assert s["depth"] == 3
    assert s["padding_is_zero"] is True

def test_long_padding_is_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="bitpacket.binary.reader"):
        parse_message("38006F45291200")
    assert "7 trailing zero bits" in caplog.text

def test_dirty_padding_is_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="bitpacket.binary.reader"):
        parse_message("D2FE2F")
    assert "not zero padding" in caplog.text
