import pytest

from asiokit.uuids import (
    NAMESPACE_DNS,
    NAMESPACE_OID,
    NAMESPACE_URL,
    NAMESPACE_X500,
    Uuid,
    UuidVariant,
    UuidVersion,
)

DNS_TEXT = "6ba7b810-9dad-11d1-80b4-00c04fd430c8"
NIL_TEXT = "00000000-0000-0000-0000-000000000000"


def test_namespace_dns_formats_as_documented():
    assert NAMESPACE_DNS.as_bytes() == bytes.fromhex(DNS_TEXT.replace("-", ""))
    assert str(Uuid.from_string(DNS_TEXT)) == DNS_TEXT


@pytest.mark.parametrize(
    "ns, text",
    [
        (NAMESPACE_URL, "6ba7b811-9dad-11d1-80b4-00c04fd430c8"),
        (NAMESPACE_OID, "6ba7b812-9dad-11d1-80b4-00c04fd430c8"),
        (NAMESPACE_X500, "6ba7b814-9dad-11d1-80b4-00c04fd430c8"),
    ],
)
def test_namespaces_parse_to_constants(ns, text):
    assert Uuid.from_string(text) == ns


def test_default_is_nil():
    value = Uuid()
    assert value.is_nil()
    assert str(value) == NIL_TEXT


def test_parse_nil_text():
    assert Uuid.from_string(NIL_TEXT).is_nil()


def test_non_nil_is_not_nil():
    assert not NAMESPACE_DNS.is_nil()


def test_roundtrip_through_string():
    parsed = Uuid.from_string(DNS_TEXT)
    assert parsed == NAMESPACE_DNS
    assert Uuid.from_string(str(parsed)) == parsed


def test_braces_uppercase_and_missing_dashes_accepted():
    assert Uuid.from_string("{" + DNS_TEXT + "}") == NAMESPACE_DNS
    assert Uuid.from_string(DNS_TEXT.upper()) == NAMESPACE_DNS
    assert Uuid.from_string(DNS_TEXT.replace("-", "")) == NAMESPACE_DNS


def test_output_is_lowercase():
    parsed = Uuid.from_string(DNS_TEXT.upper())
    assert str(parsed) == DNS_TEXT


@pytest.mark.parametrize(
    "text",
    [
        "",
        "{" + DNS_TEXT,
        DNS_TEXT + "}",
        DNS_TEXT[:-1],
        DNS_TEXT + "0",
        DNS_TEXT.replace("6", "g", 1),
        "{}",
        "{",
        DNS_TEXT.replace("-", " "),
    ],
)
def test_invalid_strings(text):
    assert Uuid.from_string(text) is None
    assert Uuid.is_valid_uuid(text) is False


def test_is_valid_uuid_accepts_good_text():
    assert Uuid.is_valid_uuid(DNS_TEXT) is True
    assert Uuid.is_valid_uuid("{" + DNS_TEXT + "}") is True


def test_version_and_variant_of_namespace():
    assert NAMESPACE_DNS.version() is UuidVersion.TIME_BASED
    assert NAMESPACE_DNS.variant() is UuidVariant.RFC


def test_nil_version_and_variant():
    assert Uuid().version() is UuidVersion.NONE
    assert Uuid().variant() is UuidVariant.NCS


@pytest.mark.parametrize(
    "nibble, expected",
    [
        (0x1, UuidVersion.TIME_BASED),
        (0x2, UuidVersion.DCE_SECURITY),
        (0x3, UuidVersion.NAME_BASED_MD5),
        (0x4, UuidVersion.RANDOM_NUMBER_BASED),
        (0x5, UuidVersion.NAME_BASED_SHA1),
        (0x6, UuidVersion.NONE),
        (0xF, UuidVersion.NONE),
    ],
)
def test_version_from_octet_six(nibble, expected):
    raw = bytearray(16)
    raw[6] = nibble << 4
    assert Uuid(bytes(raw)).version() is expected


@pytest.mark.parametrize(
    "octet, expected",
    [
        (0x00, UuidVariant.NCS),
        (0x7F, UuidVariant.NCS),
        (0x80, UuidVariant.RFC),
        (0xBF, UuidVariant.RFC),
        (0xC0, UuidVariant.MICROSOFT),
        (0xDF, UuidVariant.MICROSOFT),
        (0xE0, UuidVariant.RESERVED),
        (0xFF, UuidVariant.RESERVED),
    ],
)
def test_variant_from_octet_eight(octet, expected):
    raw = bytearray(16)
    raw[8] = octet
    assert Uuid(bytes(raw)).variant() is expected


def test_as_bytes_roundtrip():
    raw = bytes(range(16))
    value = Uuid(raw)
    assert value.as_bytes() == raw
    assert bytes(value) == raw
    assert Uuid(value.as_bytes()) == value


def test_as_bytes_matches_string():
    assert NAMESPACE_DNS.as_bytes().hex() == DNS_TEXT.replace("-", "")


def test_wrong_length_rejected():
    with pytest.raises(ValueError):
        Uuid(bytes(15))
    with pytest.raises(ValueError):
        Uuid(bytes(17))


def test_ordering_is_bytewise():
    assert Uuid() < NAMESPACE_DNS
    assert NAMESPACE_DNS < NAMESPACE_URL < NAMESPACE_OID < NAMESPACE_X500
    assert sorted([NAMESPACE_X500, Uuid(), NAMESPACE_DNS]) == [
        Uuid(),
        NAMESPACE_DNS,
        NAMESPACE_X500,
    ]


def test_equal_values_hash_equal_and_dedupe():
    a = Uuid.from_string(DNS_TEXT)
    b = Uuid.from_string("{" + DNS_TEXT.upper() + "}")
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b, NAMESPACE_URL}) == 2


def test_immutable():
    value = Uuid()
    with pytest.raises(AttributeError):
        value.data = bytes(16)