import importlib.util
import os
import pathlib
import sys

import pytest

# Ensure matplotlib uses a non-interactive backend for headless test runs.
os.environ.setdefault("MPLBACKEND", "Agg")

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from unknown_order import config  # noqa: E402
from unknown_order.backends import get_backend  # noqa: E402

HAS_GMPY2 = importlib.util.find_spec("gmpy2") is not None

KERNELS = [
    pytest.param("python", id="python"),
    pytest.param("gmp", id="gmp", marks=pytest.mark.skipif(not HAS_GMPY2, reason="gmpy2 not installed")),
]


@pytest.fixture(params=KERNELS)
def backend(request):
    return get_backend(request.param)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    for name in (config.ENV_BACKEND, config.ENV_ROUNDS, config.ENV_SIEVE):
        monkeypatch.delenv(name, raising=False)
    config.reset()
    yield
    config.reset()
