"""
unknown-order CLI – number-theory primitives from the shell.

Usage:
  unknown-order prime 1024
  unknown-order safe-prime 256
  unknown-order is-prime 0xffffffffffffffc5
  unknown-order random 1000000 --count 10
  unknown-order modpow 6 -5 13
  unknown-order invert 7 13
  unknown-order gcd 13 17
  unknown-order encode 12345 --multibase base58btc
  unknown-order decode 01000000000000000001
  unknown-order bench --bits 2048 --plot out/bench.png

Numbers are decimal or 0x/0o/0b prefixed, optionally signed.  Anything
else is tried as a multibase string (e.g. ``z...`` or ``f...``).
"""

from __future__ import annotations

import argparse
import logging
import textwrap
import time
from typing import List, Optional

from unknown_order import configure
from unknown_order.backends import available_backends, get_backend
from unknown_order.bignumber import BigNumber
from unknown_order.encoding import MULTIBASE_PREFIXES, decode, encode, from_multibase
from unknown_order.errors import DecodeError, UnknownOrderError
from unknown_order.utils import console_ui
from unknown_order.utils.entropy import sample_entropy

logger = logging.getLogger(__name__)


def _number(text: str) -> BigNumber:
    try:
        return BigNumber(text)
    except ValueError:
        pass
    try:
        return from_multibase(text)
    except DecodeError:
        raise ValueError(f"not a number: {text!r}") from None


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return value


def _render(value: BigNumber, multibase: Optional[str]) -> str:
    return value.to_multibase(multibase) if multibase else str(value)


# -------- commands --------

def cmd_prime(args) -> int:
    start = time.perf_counter()
    value = BigNumber.prime(args.bits)
    console_ui.value(_render(value, args.multibase))
    logger.info("Generated %d-bit prime in %.2fs", args.bits, time.perf_counter() - start)
    return 0


def cmd_safe_prime(args) -> int:
    start = time.perf_counter()
    value = BigNumber.safe_prime(args.bits)
    console_ui.value(_render(value, args.multibase))
    logger.info("Generated %d-bit safe prime in %.2fs", args.bits, time.perf_counter() - start)
    return 0


def cmd_is_prime(args) -> int:
    verdict = _number(args.n).is_prime()
    console_ui.value("prime" if verdict else "composite")
    return 0


def cmd_random(args) -> int:
    bound = _number(args.bound)
    samples = [BigNumber.random(bound) for _ in range(args.count)]
    for sample in samples:
        console_ui.value(_render(sample, args.multibase))
    if args.count > 1:
        width = len(bound.to_bytes())
        console_ui.kv("byte entropy (bits/byte)", f"{sample_entropy(samples, width):.2f}")
    return 0


def cmd_modpow(args) -> int:
    result = _number(args.base).modpow(_number(args.exponent), _number(args.modulus))
    console_ui.value(_render(result, args.multibase))
    return 0


def cmd_invert(args) -> int:
    a, n = _number(args.a), _number(args.n)
    inverse = a.invert(n)
    if inverse is None:
        console_ui.error(f"{a} has no inverse modulo {abs(n)}")
        return 1
    console_ui.value(_render(inverse, args.multibase))
    return 0


def cmd_gcd(args) -> int:
    result = _number(args.a).extended_gcd(_number(args.b))
    console_ui.kv("gcd", result.gcd)
    console_ui.kv("x", result.x)
    console_ui.kv("y", result.y)
    return 0


def cmd_encode(args) -> int:
    n = _number(args.n)
    if args.multibase:
        console_ui.value(n.to_multibase(args.multibase))
    else:
        console_ui.value(encode(n).hex())
    if n.is_negative():
        console_ui.warning("the encoding carries the magnitude only; the sign is dropped")
    return 0


def cmd_decode(args) -> int:
    try:
        raw = bytes.fromhex(args.hex)
    except ValueError:
        console_ui.error("input is not valid hex")
        return 1
    console_ui.value(decode(raw))
    return 0


def cmd_bench(args) -> int:
    from unknown_order.reports.backend_dashboard import measure_backends

    names = args.backends.split(",") if args.backends else None
    console_ui.section(f"Kernel benchmark ({args.bits} bits)")
    timings = measure_backends(names, bits=args.bits, repeats=args.repeats)
    for timing in timings:
        console_ui.kv(f"{timing.backend:>8} {timing.operation:<13}", f"{timing.millis:.3f} ms")
    console_ui.success("All kernels agree on every result.")

    if args.plot:
        try:
            from unknown_order.reports.backend_dashboard import make_backend_dashboard

            path = make_backend_dashboard(timings, args.plot)
        except ImportError:
            console_ui.error("plotting needs matplotlib (pip install unknown-order[reports])")
            return 1
        console_ui.kv("dashboard", path)
    return 0


# -------- argument parsing --------

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="unknown-order",
        description="Big-integer primitives for groups of unknown order.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""
        Examples:
          unknown-order prime 1024
          unknown-order --backend gmp modpow 6 -5 13
        """),
    )
    ap.add_argument("--backend", choices=available_backends(), help="Big-integer kernel to use.")
    ap.add_argument("--rounds", type=_positive_int, help="Miller-Rabin rounds for primality tests.")
    ap.add_argument("--plain", action="store_true", help="Disable colors; print plain ASCII.")
    ap.add_argument("--log-level", default="WARNING", help="Logging verbosity (DEBUG, INFO, WARNING, ...)")

    sub = ap.add_subparsers(dest="command", required=True)
    encodings = sorted(MULTIBASE_PREFIXES)

    def output_option(p: argparse.ArgumentParser) -> None:
        p.add_argument("--multibase", choices=encodings, help="Print results as multibase strings.")

    p = sub.add_parser("prime", help="Generate a random prime.")
    p.add_argument("bits", type=_positive_int)
    output_option(p)
    p.set_defaults(func=cmd_prime)

    p = sub.add_parser("safe-prime", help="Generate a random safe prime p = 2q + 1.")
    p.add_argument("bits", type=_positive_int)
    output_option(p)
    p.set_defaults(func=cmd_safe_prime)

    p = sub.add_parser("is-prime", help="Test a number for primality.")
    p.add_argument("n")
    p.set_defaults(func=cmd_is_prime)

    p = sub.add_parser("random", help="Sample uniformly from [0, BOUND).")
    p.add_argument("bound")
    p.add_argument("--count", type=_positive_int, default=1)
    output_option(p)
    p.set_defaults(func=cmd_random)

    p = sub.add_parser("modpow", help="BASE ** EXP mod |MOD| (EXP may be negative).")
    p.add_argument("base")
    p.add_argument("exponent")
    p.add_argument("modulus")
    output_option(p)
    p.set_defaults(func=cmd_modpow)

    p = sub.add_parser("invert", help="Modular inverse of A modulo |N|.")
    p.add_argument("a")
    p.add_argument("n")
    output_option(p)
    p.set_defaults(func=cmd_invert)

    p = sub.add_parser("gcd", help="Extended GCD with Bezout coefficients.")
    p.add_argument("a")
    p.add_argument("b")
    p.set_defaults(func=cmd_gcd)

    p = sub.add_parser("encode", help="Wire-encode N (hex output) or print it as multibase.")
    p.add_argument("n")
    output_option(p)
    p.set_defaults(func=cmd_encode)

    p = sub.add_parser("decode", help="Decode a hex wire encoding.")
    p.add_argument("hex")
    p.set_defaults(func=cmd_decode)

    p = sub.add_parser("bench", help="Time every installed kernel.")
    p.add_argument("--bits", type=_positive_int, default=1024)
    p.add_argument("--repeats", type=_positive_int, default=5)
    p.add_argument("--backends", help="Comma-separated kernel names (default: all installed).")
    p.add_argument("--plot", help="Write a dashboard image to this path (needs matplotlib).")
    p.set_defaults(func=cmd_bench)

    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level_value = getattr(logging, str(args.log_level).upper(), logging.WARNING)
    logging.basicConfig(
        level=level_value,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    console_ui.init(plain=args.plain)

    try:
        overrides = {}
        if args.backend:
            overrides["backend"] = args.backend
        if args.rounds:
            overrides["primality_rounds"] = args.rounds
        if overrides:
            configure(**overrides)
        get_backend()
        return args.func(args)
    except (UnknownOrderError, ValueError) as exc:
        console_ui.error(str(exc))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
