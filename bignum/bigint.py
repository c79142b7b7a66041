"""Signed integers of unbounded width over 32-bit words.

A ``BigInt`` carries a non-empty tuple of words, most significant first,
read as a two's-complement number of ``32 * len(words)`` bits. For example
``(44, 345, 3)`` is ``44 * (2**32)**2 + 345 * 2**32 + 3`` and
``(0xFFFFFFFA, 0xFFFFFFF8)`` is ``-(5 * 2**32 + 8)``.

Addition never overflows: operands are sign-extended by one guard word
before the carry chain runs, and the result is truncated back to its
shortest form afterwards.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Tuple

from .basic import BITS, MASK, SIGN_MASK, check_word, convert, sign_fill, to_internal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BigInt:
    words: Tuple[int, ...]

    def __post_init__(self) -> None:
        words = tuple(self.words)
        if not words:
            raise ValueError("BigInt requires at least one word")
        for w in words:
            check_word(w)
        object.__setattr__(self, "words", words)

    @classmethod
    def from_int(cls, n: int) -> 'BigInt':
        return cls(tuple(to_internal(n)))

    def to_int(self) -> int:
        return convert(self.words)

    @property
    def is_negative(self) -> bool:
        return bool(self.words[0] & SIGN_MASK)

    def __len__(self) -> int:
        return len(self.words)

    def __add__(self, other) -> 'BigInt':
        if not isinstance(other, BigInt):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other) -> 'BigInt':
        if not isinstance(other, BigInt):
            return NotImplemented
        return sub(self, other)

    def __neg__(self) -> 'BigInt':
        return negate(self)

    def __str__(self) -> str:
        return to_hex_string(self)

    def __repr__(self) -> str:
        return f"BigInt([{', '.join(f'0x{w:08x}' for w in self.words)}])"


def new(word: int) -> BigInt:
    return BigInt((word,))


def new_large(words: Iterable[int]) -> BigInt:
    """Build a value from explicit words; no normalization is applied."""
    return BigInt(tuple(words))


def extend(value: BigInt, length: int) -> BigInt:
    """Sign-extend ``value`` to exactly ``length`` words."""
    if length < len(value):
        raise ValueError(f"cannot extend {len(value)} words to {length}")
    fill = sign_fill(value.words[0])
    return BigInt((fill,) * (length - len(value)) + value.words)


def truncate(value: BigInt) -> BigInt:
    """Drop redundant sign words, keeping the value and its sign.

    The leading word goes only while it is all sign bits *and* the next
    word's top bit carries the same sign. Dropping a fill word in front
    of a word with the opposite top bit would flip the sign.
    """
    words = value.words
    fill = sign_fill(words[0])
    sign = fill & SIGN_MASK

    start = 0
    while start < len(words) - 1:
        if words[start] != fill or words[start + 1] & SIGN_MASK != sign:
            break
        start += 1

    if start == 0:
        return value
    return BigInt(words[start:])


def is_canonical(value: BigInt) -> bool:
    return truncate(value) == value


def add(a: BigInt, b: BigInt) -> BigInt:
    size = max(len(a), len(b)) + 1
    lhs = extend(a, size).words
    rhs = extend(b, size).words

    out = [0] * size
    carry = 0
    for i in range(size - 1, -1, -1):
        acc = lhs[i] + rhs[i] + carry
        out[i] = acc & MASK
        carry = acc >> BITS
    # carry out of the guard word is past the sign, the sum is exact mod 2**(32 * size)

    res = truncate(BigInt(tuple(out)))
    if len(res) > max(len(a), len(b)):
        logger.debug("carrier grew to %d words", len(res))
    return res


def negate(value: BigInt) -> BigInt:
    # complement then +1 through add so that the most negative value grows
    complement = BigInt(tuple(w ^ MASK for w in value.words))
    return add(complement, new(1))


def sub(a: BigInt, b: BigInt) -> BigInt:
    return add(a, negate(b))


def to_hex_string(value: BigInt) -> str:
    return ''.join(f"{w:08x}" for w in value.words)
