import pytest
from hexbytes import HexBytes
from web3.datastructures import AttributeDict

from payment_gateway.utils.normalize import normalize


@pytest.mark.parametrize(
    "value, expected",
    argvalues=[
        (0, "0"),
        (1, "1"),
        (2 ** 53 - 1, "9007199254740991"),
        (2 ** 53, "9007199254740992"),
        (-(2 ** 53), "-9007199254740992"),
        (10 ** 30, "1000000000000000000000000000000"),
    ],
    ids=[
        "Zero",
        "Small integer",
        "Largest safe integer",
        "Smallest unsafe integer",
        "Negative unsafe integer",
        "Wei amount",
    ],
)
def test_integers_become_decimal_strings(value, expected):
    assert normalize(value) == expected


def test_json_type_of_a_field_does_not_depend_on_its_magnitude():
    small, large = normalize({"value": 10 ** 15}), normalize({"value": 10 ** 16})

    assert type(small["value"]) is type(large["value"]) is str


@pytest.mark.parametrize(
    "value",
    argvalues=[True, False, None, 1.5, "0x01", "123456789012345678901234567890"],
    ids=["True", "False", "None", "Float", "Hex string", "Numeric string"],
)
def test_other_primitives_are_unchanged(value):
    assert normalize(value) is value


def test_bytes_become_prefixed_hex_strings():
    assert normalize(HexBytes("0xdeadbeef")) == "0xdeadbeef"
    assert normalize(b"\x00\x01") == "0x0001"


def test_nested_structures_keep_their_shape():
    big = 2 ** 64
    value = AttributeDict(
        {
            "blockNumber": 5,
            "value": big,
            "logs": [AttributeDict({"topics": [HexBytes("0x01")], "data": big, "removed": False})],
            "accessList": (),
        }
    )

    assert normalize(value) == {
        "blockNumber": "5",
        "value": str(big),
        "logs": [{"topics": ["0x01"], "data": str(big), "removed": False}],
        "accessList": [],
    }
    assert type(normalize(value)) is dict


def test_normalizing_twice_changes_nothing():
    value = {"a": [1, 2 ** 60, {"b": (2 ** 70, HexBytes("0xff"), True)}], "c": None}

    once = normalize(value)

    assert normalize(once) == once


def test_input_is_not_modified():
    value = {"values": [2 ** 60]}

    normalize(value)

    assert value == {"values": [2 ** 60]}
