from __future__ import annotations


class PacketError(ValueError):
    """Base class for every structural failure while decoding or evaluating a message."""


class InvalidHexDigit(PacketError):
    pass


class OutOfBits(PacketError):
    pass


class InvalidTypeTag(PacketError):
    pass


class MalformedSubpacketLength(PacketError):
    pass


class ArityViolation(PacketError):
    pass


class RecursionLimitExceeded(PacketError):
    pass
