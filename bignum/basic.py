from typing import List, Sequence

BITS = 32
MAX_VALUE = (1<<BITS)
MASK = MAX_VALUE - 1
SIGN_MASK = 1 << (BITS - 1)


def sign_fill(word: int) -> int:
    return MASK if word & SIGN_MASK else 0


def check_word(word: int) -> int:
    if isinstance(word, bool) or not isinstance(word, int):
        raise TypeError(f"word must be an int, got {type(word).__name__}")
    if not 0 <= word <= MASK:
        raise ValueError(f"word out of range [0, 0x{MASK:x}]: {word}")
    return word


def convert(l: Sequence[int]) -> int:
    """Two's-complement value of a most-significant-first word sequence."""
    a = 0
    for x in l:
        a = (a << BITS) | x

    if l and l[0] & SIGN_MASK:
        a -= 1 << (BITS * len(l))
    return a


def to_internal(n: int) -> List[int]:
    """Shortest word sequence whose two's-complement value is ``n``."""
    bits = n.bit_length() if n >= 0 else (~n).bit_length()
    size = bits // BITS + 1

    u = n & ((1 << (BITS * size)) - 1)
    a: List[int] = []
    for _ in range(size):
        a.append(u & MASK)
        u >>= BITS
    return a[::-1]
