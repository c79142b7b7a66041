from .basic import BITS, MASK, MAX_VALUE, SIGN_MASK
from .bigint import (
    BigInt,
    add,
    extend,
    is_canonical,
    negate,
    new,
    new_large,
    sub,
    to_hex_string,
    truncate,
)

__all__ = [
    "BITS",
    "MASK",
    "MAX_VALUE",
    "SIGN_MASK",
    "BigInt",
    "add",
    "extend",
    "is_canonical",
    "negate",
    "new",
    "new_large",
    "sub",
    "to_hex_string",
    "truncate",
]

__version__ = "0.1.0"
