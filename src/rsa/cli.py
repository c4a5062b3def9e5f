"""
Console entry point: generate a key pair, encrypt a number, decrypt it back.

    python -m src.rsa --seed 7 --message 65
    python -m src.rsa --p 61 --q 53 --e 17 --message 65 --json > run.json
    python -m src.rsa --key-file run.json --message 100
"""

import argparse
import json
import logging
import random
import sys
from pathlib import Path
from typing import Callable, Sequence

from src.core.contracts import load_key_pair, validate_exchange, validate_key_pair
from src.core.domain.int_kind import IntKind, OverflowPolicy, parse_int_kind
from src.rsa.cipher import run_exchange
from src.rsa.keygen import KeyGenConfig, derive_key_pair, generate_key_pair

logger = logging.getLogger(__name__)


def int_kind_arg(text: str) -> IntKind | None:
    """argparse type for --kind: an IntKind name or 'none' for unbounded."""
    if text.strip().lower() == "none":
        return None
    try:
        return parse_int_kind(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m src.rsa",
        description="Textbook RSA over small primes: key derivation, encryption, decryption.",
    )
    parser.add_argument("--p", type=int, help="first prime factor (requires --q)")
    parser.add_argument("--q", type=int, help="second prime factor (requires --p)")
    parser.add_argument("--e", type=int, help="public exponent (random odd coprime by default)")
    parser.add_argument(
        "--key-file",
        type=Path,
        help="load the key pair from an rsa_key_pair contract or a previous --json output",
    )
    parser.add_argument("--seed", type=int, help="seed for reproducible prime/exponent selection")
    parser.add_argument("--message", "-m", type=int, help="plaintext M; prompted when omitted")
    parser.add_argument(
        "--kind",
        type=int_kind_arg,
        default="uint32",
        help="integer kind for arithmetic (int32, uint32, int64, uint64, ..., or 'none')",
    )
    parser.add_argument(
        "--wrap",
        action="store_true",
        help="wrap on overflow like native integers instead of raising",
    )
    parser.add_argument(
        "--no-reduce",
        action="store_true",
        help="reject plaintext outside [0, N) instead of reducing it modulo N",
    )
    parser.add_argument("--json", action="store_true", help="print key pair and exchange as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="enable debug logging")
    return parser


def build_config(args: argparse.Namespace) -> KeyGenConfig:
    return KeyGenConfig(
        int_kind=args.kind,
        overflow_policy=OverflowPolicy.WRAP if args.wrap else OverflowPolicy.RAISE,
        reduce_plaintext=not args.no_reduce,
    )


def read_message(n: int, input_fn: Callable[[str], str]) -> int:
    try:
        raw = input_fn(f"Enter 0 <= M < {n}: ")
    except EOFError:
        raise ValueError("no plaintext given: input closed") from None
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"plaintext must be an integer, got {raw!r}") from None


def main(
    argv: Sequence[str] | None = None,
    input_fn: Callable[[str], str] = input,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if (args.p is None) != (args.q is None):
        parser.error("--p and --q must be given together")
    if args.key_file is not None and (args.p is not None or args.e is not None):
        parser.error("--key-file cannot be combined with --p/--q/--e")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = build_config(args)
        rng = random.Random(args.seed)
        if args.key_file is not None:
            key_pair = load_key_pair(json.loads(args.key_file.read_text(encoding="utf-8")))
            logger.debug("Loaded key pair n=%d from %s", key_pair.n, args.key_file)
        elif args.p is not None:
            key_pair = derive_key_pair(args.p, args.q, e=args.e, rng=rng, config=config)
        else:
            key_pair = generate_key_pair(rng=rng, config=config)
            if args.e is not None:
                key_pair = derive_key_pair(
                    key_pair.p, key_pair.q, e=args.e, rng=rng, config=config
                )

        if not args.json:
            print(f"P = {key_pair.p}")
            print(f"Q = {key_pair.q}")
            print(f"N = {key_pair.n}")
            print(f"Phi(N) = {key_pair.phi}")
            print()
            print(f"e = {key_pair.e}")
            print(f"d = {key_pair.d}")
            print()

        message = args.message
        if message is None:
            message = read_message(key_pair.n, input_fn)

        exchange = run_exchange(message, key_pair, config)
        if args.json:
            payload = {
                "key_pair": validate_key_pair(key_pair),
                "exchange": validate_exchange(exchange),
            }
    except (ValueError, ArithmeticError, OSError) as exc:
        logger.debug("RSA run failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(payload, indent=2))
    else:
        print()
        print(f"M = {exchange.plaintext}")
        print(f"C = {exchange.ciphertext}")
        print(f"M = {exchange.recovered}")

    return 0 if exchange.round_trip_ok else 1
