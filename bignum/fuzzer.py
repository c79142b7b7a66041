from pathlib import Path
import argparse
import logging
import operator
from dataclasses import dataclass
from random import randint, seed
from time import perf_counter
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .basic import MASK, SIGN_MASK
from .bigint import BigInt, add, new_large, sub, to_hex_string

logger = logging.getLogger(__name__)

ERROR_INPUT = Path('error.txt')

OPERATIONS: Dict[str, Tuple[Callable[[BigInt, BigInt], BigInt], Callable[[int, int], int]]] = {
    'a': (add, operator.add),
    's': (sub, operator.sub),
}

SYMBOLS = {'a': '+', 's': '-'}


@dataclass
class Result:
    success: Optional[str] = None
    error: Optional[str] = None


def random_words(length: int, is_neg: bool = False) -> List[int]:
    n = [randint(0, MASK) for _ in range(length)]
    if is_neg:
        n[0] |= SIGN_MASK
    else:
        n[0] &= ~SIGN_MASK & MASK
    # sometimes pad with redundant sign words
    if randint(0, 10) > 7:
        fill = MASK if is_neg else 0
        n = [fill] * randint(1, 3) + n
    return n


def shorten(s: str, limit: int = 50) -> str:
    if len(s) > limit:
        return s[:limit] + '...'
    return s


def print_binary_error(a: str, b: str, ans: str, op: str, err: str, path: Path = ERROR_INPUT) -> None:
    with open(path, 'w') as f:
        f.write(a)
        f.write('\n')
        f.write(b)
        f.write('\n')
        f.write(ans)
    print(f"{shorten(a)} {SYMBOLS[op]} {shorten(b)} -- \x1b[31mFAILED\x1b[0m\n\t{err}")


def print_binary_success(a: str, b: str, op: str, time: str) -> None:
    print(f"{shorten(a)} {SYMBOLS[op]} {shorten(b)} -- \x1b[32mPASSED\x1b[0m\n\tTook {time}")


def expected(a: BigInt, b: BigInt, op: str) -> BigInt:
    _, reference = OPERATIONS[op]
    return BigInt.from_int(reference(a.to_int(), b.to_int()))


def run_case(a: BigInt, b: BigInt, ans: BigInt, op: str) -> Result:
    func, _ = OPERATIONS[op]

    start = perf_counter()
    res = func(a, b)
    took = perf_counter() - start

    if res.to_int() != ans.to_int():
        return Result(error=f"Mismatch value: {to_hex_string(res)} != {to_hex_string(ans)}")
    if res != ans:
        return Result(error=f"Result not truncated: {to_hex_string(res)} != {to_hex_string(ans)}")
    return Result(success=f"{took * 1e6:.2f}us")


def test_binary(max_len: int, op: str = 'a', rounds: int = 1000, error_file: Path = ERROR_INPUT) -> bool:
    for i in range(rounds):
        len1 = randint(1, max_len)
        len2 = randint(1, max_len)
        logger.debug("case %d: len1=%d, len2=%d", i, len1, len2)

        a_neg = True if randint(0, 10) > 5 else False
        b_neg = True if randint(0, 10) > 5 else False
        a = new_large(random_words(len1, a_neg))
        b = new_large(random_words(len2, b_neg))

        ans = expected(a, b, op)
        res = run_case(a, b, ans, op)
        if res.error:
            print_binary_error(str(a), str(b), str(ans), op, res.error, error_file)
            return False

        print_binary_success(str(a), str(b), op, res.success or '')

    return True


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="bignum-fuzz")
    parser.add_argument('-b', '--binary', help="Fuzzy test binary operation.", choices=list(OPERATIONS), default='a')
    parser.add_argument('-n', '--rounds', type=int, help="Number of random cases.", default=1000)
    parser.add_argument('-l', '--max-len', type=int, help="Maximum operand length in words.", default=16)
    parser.add_argument('-s', '--seed', help="Random seed.", default="BigNum")
    parser.add_argument('-e', '--error-file', type=Path, help="Where failing operands are written.", default=ERROR_INPUT)
    parser.add_argument('-v', '--verbose', action='store_true', help="Enable debug logging.")

    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    if args.max_len < 1:
        logger.error("--max-len must be at least 1, got %d", args.max_len)
        return 2

    seed(args.seed)
    logger.info("fuzzing '%s' for %d rounds, up to %d words", SYMBOLS[args.binary], args.rounds, args.max_len)
    ok = test_binary(args.max_len, op=args.binary, rounds=args.rounds, error_file=args.error_file)
    logger.info("fuzzing %s", "passed" if ok else "failed")
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
