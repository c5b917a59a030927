"""UUID generators and convenience helpers built on the :class:`Uuid` value type."""

from __future__ import annotations

import hashlib
import random
import threading
import uuid as _stdlib_uuid
from typing import Protocol

from asiokit.uuids import Uuid, UuidVariant

__all__ = [
    "NS_DNS",
    "NS_URL",
    "NS_OID",
    "NS_X500",
    "random_uuid",
    "name_based_uuid",
    "generate_system",
    "generate_system_string",
    "generate_secure_random",
    "generate_random",
    "generate_random_string",
    "generate_name_based",
    "generate_time_based",
    "generate_compact_string",
    "from_string",
    "is_valid",
    "nil",
    "is_nil",
    "compare",
    "get_version",
    "get_variant",
    "generate_from_domain",
    "generate_from_url",
    "new_uuid",
    "new_uuid_compact",
    "is_uuid",
]

# Predefined namespace identifiers from RFC 4122.
NS_DNS = "6ba7b810-9dad-11d1-80b4-00c04fd430c8"
NS_URL = "6ba7b811-9dad-11d1-80b4-00c04fd430c8"
NS_OID = "6ba7b812-9dad-11d1-80b4-00c04fd430c8"
NS_X500 = "6ba7b814-9dad-11d1-80b4-00c04fd430c8"


class _BitSource(Protocol):
    def getrandbits(self, k: int) -> int: ...


def _apply_layout(raw: bytearray, version: int) -> Uuid:
    # variant must be 10xxxxxx
    raw[8] = (raw[8] & 0xBF) | 0x80
    # version nibble
    raw[6] = (raw[6] & 0x0F) | (version << 4)
    return Uuid(bytes(raw))


def random_uuid(rng: _BitSource) -> Uuid:
    """Build a version 4 UUID from four 32-bit draws of ``rng``."""
    raw = bytearray()
    for _ in range(4):
        raw += rng.getrandbits(32).to_bytes(4, "little")
    return _apply_layout(raw, 4)


def name_based_uuid(namespace_uuid: Uuid, name: str | bytes) -> Uuid:
    """Build a version 5 (SHA-1) UUID from a namespace and a name."""
    payload = name.encode("utf-8") if isinstance(name, str) else bytes(name)
    digest = hashlib.sha1(namespace_uuid.as_bytes() + payload).digest()
    return _apply_layout(bytearray(digest[:16]), 5)


_local = threading.local()


def _secure_source() -> random.SystemRandom:
    source = getattr(_local, "secure", None)
    if source is None:
        source = _local.secure = random.SystemRandom()
    return source


def _fast_source() -> random.Random:
    source = getattr(_local, "fast", None)
    if source is None:
        source = _local.fast = random.Random(_secure_source().getrandbits(32))
    return source


def generate_system() -> Uuid:
    """Generate a UUID with the operating system's generator."""
    return Uuid(_stdlib_uuid.uuid4().bytes)


def generate_system_string() -> str:
    return str(generate_system())


def generate_secure_random() -> Uuid:
    """Generate a version 4 UUID from the system's secure random source."""
    return random_uuid(_secure_source())


def generate_random() -> Uuid:
    """Generate a version 4 UUID from a per-thread Mersenne Twister."""
    return random_uuid(_fast_source())


def generate_random_string() -> str:
    return str(generate_random())


def generate_name_based(namespace_uuid: Uuid, name: str | bytes) -> Uuid:
    return name_based_uuid(namespace_uuid, name)


def generate_time_based() -> Uuid:
    """Time-based generation is not enabled; falls back to the system generator."""
    return generate_system()


def generate_compact_string() -> str:
    """A random UUID as 32 hex digits without dashes."""
    return str(generate_random()).replace("-", "")


def from_string(text: str) -> Uuid | None:
    return Uuid.from_string(text)


def is_valid(text: str) -> bool:
    return from_string(text) is not None


def nil() -> Uuid:
    return Uuid()


def is_nil(value: Uuid) -> bool:
    return value.is_nil()


def compare(lhs: Uuid, rhs: Uuid) -> int:
    """Return -1, 0 or 1 as ``lhs`` is less than, equal to or greater than ``rhs``."""
    if lhs < rhs:
        return -1
    if lhs == rhs:
        return 0
    return 1


def get_version(value: Uuid) -> int:
    return int(value.version())


def get_variant(value: Uuid) -> UuidVariant:
    return value.variant()


def _from_namespace(namespace_text: str, name: str) -> Uuid:
    namespace = from_string(namespace_text)
    if namespace is None:
        return generate_system()
    return generate_name_based(namespace, name)


def generate_from_domain(domain: str) -> Uuid:
    return _from_namespace(NS_DNS, domain)


def generate_from_url(url: str) -> Uuid:
    return _from_namespace(NS_URL, url)


def new_uuid() -> str:
    return generate_random_string()


def new_uuid_compact() -> str:
    return generate_compact_string()


def is_uuid(text: str) -> bool:
    return is_valid(text)