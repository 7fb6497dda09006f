#!/usr/bin/env python3
import sys
from pathlib import Path
from bitpacket.binary.reader import _load_hex, parse_message
from bitpacket.evaluate import value
from bitpacket.models.common import TypeId

def dump(packet, indent=0):
    pad = "  " * indent
    if packet.is_literal:
        print(f"{pad}v{packet.version} literal {packet.literal}")
        return
    framing = packet.length_type.name.lower() if packet.length_type is not None else "?"
    print(f"{pad}v{packet.version} {TypeId(packet.type_id).name.lower()} "
          f"[{framing}, {len(packet.children)} sub-packets] = {value(packet)}")
    for child in packet.children:
        dump(child, indent + 1)

def main(path: Path):
    result = parse_message(_load_hex(path))
    dump(result.packet)
    print(f"trailing bits: {result.trailing_bits} (zero padding: {result.padding_is_zero})")

if __name__ == "__main__":
    main(Path(sys.argv[1]) if len(sys.argv) > 1 else Path("input.txt"))
