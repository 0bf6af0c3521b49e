"""Time the engine's hot operations on every installed kernel.

All kernels receive the same inputs and must agree on every deterministic
result; a disagreement means a kernel violates the backend contract.
"""
from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

from unknown_order.backends import get_backend, installed_backends
from unknown_order.bignumber import BigNumber
from unknown_order.primes import prime
from unknown_order.sampling import random_below

logger = logging.getLogger(__name__)

OPERATIONS = ("modpow", "is_prime", "random_below", "divmod")


@dataclass(frozen=True)
class BackendTiming:
    backend: str
    operation: str
    seconds: float
    repeats: int

    @property
    def millis(self) -> float:
        return self.seconds * 1000.0


def _fixed_inputs(bits: int, seed: int) -> Dict[str, int]:
    rng = random.Random(seed)
    modulus = rng.getrandbits(bits) | (1 << (bits - 1)) | 1
    return {
        "modulus": modulus,
        "base": rng.getrandbits(bits) % modulus,
        "exponent": rng.getrandbits(bits),
        "dividend": rng.getrandbits(2 * bits),
    }


def measure_backends(
    names: Optional[Sequence[str]] = None,
    bits: int = 1024,
    repeats: int = 5,
    *,
    seed: int = 0x5EED,
) -> List[BackendTiming]:
    """Return the mean wall time per call of each operation on each kernel."""

    if bits < 16:
        raise ValueError("bits must be at least 16")
    if repeats < 1:
        raise ValueError("repeats must be at least 1")

    names = list(names) if names else installed_backends()
    inputs = _fixed_inputs(bits, seed)
    known_prime = int(prime(bits // 2, entropy=random.Random(seed)))

    timings: List[BackendTiming] = []
    reference: Dict[str, object] = {}
    for name in names:
        kernel = get_backend(name)
        modulus = BigNumber(inputs["modulus"], backend=kernel)
        base = BigNumber(inputs["base"], backend=kernel)
        exponent = BigNumber(inputs["exponent"], backend=kernel)
        dividend = BigNumber(inputs["dividend"], backend=kernel)
        candidate = BigNumber(known_prime, backend=kernel)

        operations: Dict[str, Callable[[], object]] = {
            "modpow": lambda: int(base.modpow(exponent, modulus)),
            "is_prime": lambda: candidate.is_prime(),
            "random_below": lambda: random_below(modulus) < modulus,
            "divmod": lambda: tuple(int(part) for part in divmod(dividend, modulus)),
        }
        for operation in OPERATIONS:
            func = operations[operation]
            start = time.perf_counter()
            for _ in range(repeats):
                result = func()
            elapsed = (time.perf_counter() - start) / repeats

            expected = reference.setdefault(operation, result)
            if result != expected:
                raise RuntimeError(f"Backend {name!r} disagrees on {operation}")
            timings.append(BackendTiming(name, operation, elapsed, repeats))
            logger.info("%s/%s: %.3f ms per call", name, operation, elapsed * 1000.0)
    return timings


def make_backend_dashboard(timings: Sequence[BackendTiming], save_path: str | Path) -> Path:
    """Render one bar panel per operation and save it as an image."""

    from unknown_order.utils.plotting import bar_panel, save, wide_grid

    fig, axes = wide_grid(2, 2)
    fig.suptitle("Kernel timings (mean per call)")
    for ax, operation in zip((ax for row in axes for ax in row), OPERATIONS):
        rows = [timing for timing in timings if timing.operation == operation]
        bar_panel(
            ax,
            [timing.backend for timing in rows],
            [timing.millis for timing in rows],
            title=operation,
            ylabel="ms",
        )
    fig.tight_layout(rect=(0, 0.03, 1, 0.94))
    return save(fig, save_path)


__all__ = ["BackendTiming", "OPERATIONS", "measure_backends", "make_backend_dashboard"]
