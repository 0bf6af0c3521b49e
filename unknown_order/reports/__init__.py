"""Benchmark reports comparing the installed big-integer kernels."""

from .backend_dashboard import BackendTiming, make_backend_dashboard, measure_backends

__all__ = ["BackendTiming", "measure_backends", "make_backend_dashboard"]
