"""Make chain client responses safe for JSON transport.

JSON consumers decode numbers as IEEE-754 doubles, which cannot represent
integers beyond 2**53 - 1 exactly. Balances, values and fees in wei routinely
exceed that range, so every chain integer is rendered as a decimal string.
This keeps a field's JSON type independent of its magnitude.
"""
from collections.abc import Mapping
from typing import Any

from eth_utils import encode_hex


def normalize(value: Any) -> Any:
    """Return a structurally identical copy of `value` that can be JSON-encoded losslessly.

    * integers become their base-10 :class:`str`
    * :class:`bytes` (including :class:`hexbytes.HexBytes`) become `0x`-prefixed hex strings
    * mappings (e.g. :class:`web3.datastructures.AttributeDict`) become plain dicts
    * lists and tuples become lists

    Everything else is returned unchanged. Applying the function to its own
    output is a no-op.
    """
    # bool is a subclass of int and must pass through untouched.
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, (bytes, bytearray)):
        return encode_hex(bytes(value))
    if isinstance(value, Mapping):
        return {key: normalize(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [normalize(item) for item in value]
    return value
