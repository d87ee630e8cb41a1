"""Input sanitization tests."""

import pytest

from gateway.validators import (
    DEFAULT_FIAT,
    parse_chain_id,
    parse_fiat_list,
    sanitize_address,
    sanitize_hex_payload,
)

HEX40 = [
    "abcdef0123456789abcdef0123456789abcdef01",
    "ABCDEF0123456789ABCDEF0123456789ABCDEF01",
    "0000000000000000000000000000000000000000",
    "AbCdEf0123456789aBcDeF0123456789AbCdEf01",
]


# ---------------------------------------------------------------------------
# sanitize_address
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("body", HEX40)
def test_address_prefix_insensitive(body):
    assert sanitize_address(body) == sanitize_address("0x" + body) == "0x" + body


@pytest.mark.parametrize("body", HEX40)
def test_address_idempotent(body):
    once = sanitize_address(body)
    assert sanitize_address(once) == once


def test_address_trims_whitespace():
    assert sanitize_address("  0x" + HEX40[0] + "\n") == "0x" + HEX40[0]


def test_address_uppercase_prefix_is_canonicalized():
    assert sanitize_address("0X" + HEX40[1]) == "0x" + HEX40[1]


@pytest.mark.parametrize("raw", [
    "",
    "   ",
    "0x",
    "not-hex",
    "0x" + "a" * 39,
    "0x" + "a" * 41,
    "a" * 39,
    "0x" + "g" * 40,
    "0x0x" + "a" * 38,
    "0x" + "a" * 20 + " " + "a" * 19,
    "0x" + "a" * 40 + "\n0x",
])
def test_address_rejects_malformed(raw):
    assert sanitize_address(raw) is None


@pytest.mark.parametrize("raw", [None, 123, b"0x" + b"a" * 40, ["0x" + "a" * 40]])
def test_address_rejects_non_strings(raw):
    assert sanitize_address(raw) is None


# ---------------------------------------------------------------------------
# parse_chain_id
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("raw, expected", [
    ("1", 1),
    ("137", 137),
    (" 42161 ", 42161),
    ("11155111", 11155111),
    ("007", 7),
    ("9007199254740991", 9007199254740991),
    (56, 56),
])
def test_chain_id_parses_positive_integers(raw, expected):
    assert parse_chain_id(raw) == expected


@pytest.mark.parametrize("raw", [
    "0",
    "-1",
    "+1",
    "1.0",
    "1e3",
    "0x1",
    "abc",
    "",
    "  ",
    "1 2",
    "9007199254740992",
    "١٢",
    None,
    0,
    -5,
    1.0,
    True,
])
def test_chain_id_rejects_invalid(raw):
    assert parse_chain_id(raw) is None


# ---------------------------------------------------------------------------
# sanitize_hex_payload
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("raw", [None, "", "  ", "0x", 42])
def test_hex_payload_defaults_to_empty_calldata(raw):
    assert sanitize_hex_payload(raw) == "0x"


def test_hex_payload_adds_prefix():
    assert sanitize_hex_payload("a9059cbb") == "0xa9059cbb"


def test_hex_payload_keeps_prefixed_value():
    assert sanitize_hex_payload("0x70a08231") == "0x70a08231"


def test_hex_payload_pads_odd_length():
    assert sanitize_hex_payload("0xabc") == "0x0abc"


@pytest.mark.parametrize("raw", ["0xzz", "hello", "0x12 34"])
def test_hex_payload_rejects_non_hex(raw):
    assert sanitize_hex_payload(raw) is None


# ---------------------------------------------------------------------------
# parse_fiat_list
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("raw", [None, "", "   ", ",,"])
def test_fiat_defaults(raw):
    assert parse_fiat_list(raw) == DEFAULT_FIAT == "USD,EUR,GBP"


def test_fiat_normalizes_case_and_duplicates():
    assert parse_fiat_list(" usd, krw ,USD") == "USD,KRW"


@pytest.mark.parametrize("raw", ["US$", "USD,E", "USD;EUR", "TOOLONGSYMBOL"])
def test_fiat_rejects_bad_symbols(raw):
    assert parse_fiat_list(raw) is None
