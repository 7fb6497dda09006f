from __future__ import annotations
import argparse, json, logging, sys
from pathlib import Path
from .binary.reader import _load_hex
from .models.packet import Packet

def _read_input(arg: str) -> str:
    """INPUT is '-' for stdin, a path to a file, or the hex message itself."""
    if arg == "-":
        return _load_hex(sys.stdin.read().encode("ascii", errors="replace"))
    p = Path(arg)
    if p.is_file():
        return _load_hex(p)
    return arg.strip()

def _decode(args):
    from .binary.reader import parse_message
    return parse_message(_read_input(args.input), max_depth=args.max_depth)

def cmd_info(args):
    if getattr(args, "summary", False):
        from .binary.reader import summarize_message
        s = summarize_message(_read_input(args.input), max_depth=args.max_depth)
        print(", ".join(f"{k}={v}" for k, v in s.items()))
        return 0
    result = _decode(args)
    print(json.dumps(result.model_dump(mode="json"), indent=2))
    return 0

def cmd_version_sum(args):
    from .evaluate import version_sum
    print(version_sum(_decode(args).packet))
    return 0

def cmd_value(args):
    from .evaluate import value
    print(value(_decode(args).packet))
    return 0

def cmd_to_json(args):
    packet = _decode(args).packet
    with open(args.output, "w", encoding="utf-8") as out:
        json.dump(packet.model_dump(mode="json"), out, indent=2)
    return 0

def cmd_from_json(args):
    from .binary.writer import write_message
    with open(args.input, "r", encoding="utf-8") as f:
        packet = Packet.model_validate_json(f.read())
    hex_string = write_message(packet, length_type=args.length_type)
    with open(args.output, "w", encoding="ascii") as out:
        out.write(hex_string + "\n")
    return 0

def cmd_plot(args):
    from .viz import plot_packet_tree
    plot_packet_tree(_decode(args).packet)
    return 0

def build_parser():
    p = argparse.ArgumentParser(prog="bitpacket", description="Bit-packed packet message decoder")
    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    p.add_argument("--max-depth", type=int, default=None, help="maximum packet nesting depth")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("info", help="print the decoded tree as JSON or a fast summary")
    sp.add_argument("input", help="hex message, path to a file holding one, or '-' for stdin")
    sp.add_argument("--summary", action="store_true", help="print statistics instead of the tree")
    sp.set_defaults(func=cmd_info)

    sp = sub.add_parser("version-sum", help="print the sum of all version fields")
    sp.add_argument("input")
    sp.set_defaults(func=cmd_version_sum)

    sp = sub.add_parser("value", help="print the evaluated value of the message")
    sp.add_argument("input")
    sp.set_defaults(func=cmd_value)

    sp = sub.add_parser("to-json", help="write the decoded tree as JSON")
    sp.add_argument("input")
    sp.add_argument("output")
    sp.set_defaults(func=cmd_to_json)

    sp = sub.add_parser("from-json", help="encode a JSON tree back into a hex message")
    sp.add_argument("input")
    sp.add_argument("output")
    sp.add_argument("--length-type", type=int, choices=[0, 1], default=None,
                    help="force framing: 0 = bit length, 1 = sub-packet count")
    sp.set_defaults(func=cmd_from_json)

    sp = sub.add_parser("plot", help="minimal tree plot")
    sp.add_argument("input")
    sp.set_defaults(func=cmd_plot)

    return p

def main(argv=None):
    p = build_parser()
    ns = p.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return ns.func(ns)
    except ValueError as e:  # PacketError, pydantic ValidationError, oversized fields
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
