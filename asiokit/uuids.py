"""RFC 4122 UUID value type: parsing, formatting, version and variant inspection."""

from __future__ import annotations

import enum
import string
from dataclasses import dataclass

__all__ = [
    "UuidVariant",
    "UuidVersion",
    "Uuid",
    "NAMESPACE_DNS",
    "NAMESPACE_URL",
    "NAMESPACE_OID",
    "NAMESPACE_X500",
]

_HEX_DIGITS = frozenset(string.hexdigits)
_DASH_POSITIONS = (8, 12, 16, 20)


class UuidVariant(enum.Enum):
    """Variant field, encoded in the high bits of octet 8."""

    NCS = "ncs"
    RFC = "rfc"
    MICROSOFT = "microsoft"
    RESERVED = "reserved"


class UuidVersion(enum.IntEnum):
    """Version field, encoded in the high nibble of octet 6."""

    NONE = 0
    TIME_BASED = 1
    DCE_SECURITY = 2
    NAME_BASED_MD5 = 3
    RANDOM_NUMBER_BASED = 4
    NAME_BASED_SHA1 = 5


def _parse(text: str) -> bytes | None:
    """Decode a textual UUID into 16 bytes, or return None if it is malformed."""
    if not text:
        return None
    body = text
    if text[0] == "{":
        if text[-1] != "}":
            return None
        body = text[1:-1]

    digits: list[str] = []
    for ch in body:
        if ch == "-":
            continue
        if len(digits) >= 32 or ch not in _HEX_DIGITS:
            return None
        digits.append(ch)

    if len(digits) < 32:
        return None
    return bytes.fromhex("".join(digits))


@dataclass(frozen=True, order=True)
class Uuid:
    """A 128-bit universally unique identifier; the default value is the nil UUID."""

    data: bytes = bytes(16)

    def __post_init__(self) -> None:
        raw = bytes(self.data)
        if len(raw) != 16:
            raise ValueError(f"a UUID holds exactly 16 bytes, got {len(raw)}")
        object.__setattr__(self, "data", raw)

    @classmethod
    def from_string(cls, text: str) -> Uuid | None:
        """Parse a UUID, with optional braces and dashes; None if the text is not one."""
        raw = _parse(text)
        return None if raw is None else cls(raw)

    @staticmethod
    def is_valid_uuid(text: str) -> bool:
        """Tell whether the text parses as a UUID."""
        return _parse(text) is not None

    def variant(self) -> UuidVariant:
        octet = self.data[8]
        if octet & 0x80 == 0x00:
            return UuidVariant.NCS
        if octet & 0xC0 == 0x80:
            return UuidVariant.RFC
        if octet & 0xE0 == 0xC0:
            return UuidVariant.MICROSOFT
        return UuidVariant.RESERVED

    def version(self) -> UuidVersion:
        nibble = self.data[6] >> 4
        try:
            return UuidVersion(nibble)
        except ValueError:
            return UuidVersion.NONE

    def is_nil(self) -> bool:
        return not any(self.data)

    def as_bytes(self) -> bytes:
        return self.data

    def __bytes__(self) -> bytes:
        return self.data

    def __str__(self) -> str:
        hexed = self.data.hex()
        parts = []
        start = 0
        for end in _DASH_POSITIONS:
            parts.append(hexed[start:end])
            start = end
        parts.append(hexed[start:])
        return "-".join(parts)

    def __repr__(self) -> str:
        return f"Uuid('{self}')"

    def __hash__(self) -> int:
        low = int.from_bytes(self.data[:8], "big")
        high = int.from_bytes(self.data[8:], "big")
        return hash(low ^ high)


NAMESPACE_DNS = Uuid(bytes([0x6B, 0xA7, 0xB8, 0x10, 0x9D, 0xAD, 0x11, 0xD1,
                            0x80, 0xB4, 0x00, 0xC0, 0x4F, 0xD4, 0x30, 0xC8]))
NAMESPACE_URL = Uuid(bytes([0x6B, 0xA7, 0xB8, 0x11, 0x9D, 0xAD, 0x11, 0xD1,
                            0x80, 0xB4, 0x00, 0xC0, 0x4F, 0xD4, 0x30, 0xC8]))
NAMESPACE_OID = Uuid(bytes([0x6B, 0xA7, 0xB8, 0x12, 0x9D, 0xAD, 0x11, 0xD1,
                            0x80, 0xB4, 0x00, 0xC0, 0x4F, 0xD4, 0x30, 0xC8]))
NAMESPACE_X500 = Uuid(bytes([0x6B, 0xA7, 0xB8, 0x14, 0x9D, 0xAD, 0x11, 0xD1,
                             0x80, 0xB4, 0x00, 0xC0, 0x4F, 0xD4, 0x30, 0xC8]))