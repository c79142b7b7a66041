import sys
from pathlib import Path
from random import randint, seed
from typing import List

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from bignum import BigInt, MASK, new_large  # noqa: E402  (import after sys.path tweak)


@pytest.fixture(scope="function")
def samples() -> List[BigInt]:
    """Seeded mix of edge words and random carriers, some non-canonical."""
    seed("BigNum")
    edges = [0, 1, 2, 0x7FFFFFFF, 0x80000000, 0x80000001, 0xFFFFFFFE, MASK]
    out = [new_large([w]) for w in edges]
    out += [new_large([MASK, 0x80000000]), new_large([0, 0x7FFFFFFF]), new_large([0, 0, 0x80000000])]
    for _ in range(20):
        out.append(new_large([randint(0, MASK) for _ in range(randint(1, 5))]))
    return out
