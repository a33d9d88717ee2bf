"""
Adapter throughput benchmarks.

Compares logging through the process-wide adapter with logging through a
Local bound to the same adapter.
"""

from __future__ import annotations

import io
import logging
import time
import typing as t
import warnings

import pytest

from yala import logger
from yala.adapters.printer import PrinterAdapter, WriterPrinter
from yala.adapters.stdlib import StdlibAdapter
from yala.logger import Local

CTX = {"request_id": "abc"}
CALLS = 10_000
ROUNDS = 5


class CountingAdapter(logger.Adapter):
    def __init__(self) -> None:
        self.count = 0

    def log(self, ctx: t.Any, entry: logger.Entry) -> None:
        self.count += 1


def _silent_stdlib() -> StdlibAdapter:
    backend = logging.getLogger("yala.tests.performance")
    backend.propagate = False
    backend.setLevel(logging.CRITICAL)
    return StdlibAdapter(backend)


ADAPTERS: dict[str, t.Callable[[], logger.Adapter]] = {
    "nop": logger.NopAdapter,
    "printer": lambda: PrinterAdapter(WriterPrinter(io.StringIO())),
    "stdlib": _silent_stdlib,
}


class TestAdapterPerformance:
    """Adapter throughput benchmarks

    Targets:
    - global info call: mean < 20us per call
    - local info call: mean < 20us per call
    """

    def _benchmark(self, log_info: t.Callable[[t.Any, str], None]) -> float:
        """Runs one round and returns the mean cost of a call in microseconds"""
        start = time.perf_counter()
        for _ in range(CALLS):
            log_info(CTX, "msg")
        end = time.perf_counter()
        return (end - start) * 1_000_000 / CALLS

    def _p95(self, log_info: t.Callable[[t.Any, str], None]) -> float:
        means = sorted(self._benchmark(log_info) for _ in range(ROUNDS))
        return means[int(len(means) * 0.95) - 1]

    def _check(self, name: str, p95: float, target: float = 20.0) -> None:
        print(f"{name}: P95 {p95:.2f}us per call")

        # Warn rather than fail, timings are unstable on shared runners
        if p95 > target:
            warnings.warn(f"{name} P95 {p95:.2f}us exceeds {target}us target", UserWarning, stacklevel=2)

    @pytest.mark.parametrize("adapter_name", sorted(ADAPTERS))
    def test_global_logger_info(self, adapter_name: str) -> None:
        """Global info through the installed adapter"""
        logger.set_adapter(ADAPTERS[adapter_name]())

        self._check(f"global logger info ({adapter_name})", self._p95(logger.info))

    @pytest.mark.parametrize("adapter_name", sorted(ADAPTERS))
    def test_local_logger_info(self, adapter_name: str) -> None:
        """Local info through the bound adapter"""
        local = Local(ADAPTERS[adapter_name]())

        self._check(f"local logger info ({adapter_name})", self._p95(local.info))

    def test_every_call_delivered(self) -> None:
        """Both paths hand every call to the adapter"""
        adapter = CountingAdapter()
        logger.set_adapter(adapter)

        self._benchmark(logger.info)
        self._benchmark(Local(adapter).info)

        assert adapter.count == 2 * CALLS

    def test_local_not_slower_than_global(self) -> None:
        """Local skips the global slot lookup, so it should not cost more"""
        adapter = logger.NopAdapter()
        logger.set_adapter(adapter)

        global_p95 = self._p95(logger.info)
        local_p95 = self._p95(Local(adapter).info)

        print(f"global P95 {global_p95:.2f}us, local P95 {local_p95:.2f}us")
        if local_p95 > global_p95 * 1.5:
            warnings.warn(
                f"local P95 {local_p95:.2f}us is well above global P95 {global_p95:.2f}us",
                UserWarning,
                stacklevel=1,
            )
