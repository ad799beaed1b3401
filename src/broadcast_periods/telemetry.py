"""Optional timings and counters for `ShowParser`.

Nothing is recorded unless BROADCAST_PERIODS_TELEMETRY=1 (or DEBUG=1) is set
at import time and at least one reporter is supplied.
"""

from collections.abc import Iterator
from contextlib import contextmanager
import logging
import os
import time
from typing import Any, Protocol, runtime_checkable

log = logging.getLogger(__name__)

# Evaluated once at import time
_TELEMETRY_ENABLED = (
    os.getenv("BROADCAST_PERIODS_TELEMETRY") == "1" or os.getenv("DEBUG") == "1"
)


@runtime_checkable
class TelemetryReporter(Protocol):
    """Anything that can receive parser timings and counters."""

    def record_timing(self, name: str, seconds: float, **metadata: Any) -> None: ...  # noqa: D102
    def record_count(self, name: str, value: int, **metadata: Any) -> None: ...  # noqa: D102


class ParserTelemetry:
    """Forwards timings and counters to its reporters.

    A reporter that raises is logged and skipped; it never fails a parse.
    """

    __slots__ = ("reporters",)

    def __init__(self, *reporters: TelemetryReporter):
        self.reporters = reporters

    @property
    def enabled(self) -> bool:
        return bool(self.reporters)

    @contextmanager
    def timed(self, name: str, **metadata: Any) -> Iterator[None]:
        """Time the enclosed block and report it under `name`."""
        if not self.reporters:
            yield
            return
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - start
            self._emit("record_timing", name, elapsed, metadata)

    def count(self, name: str, value: int = 1, **metadata: Any) -> None:
        if self.reporters:
            self._emit("record_count", name, value, metadata)

    def _emit(self, method: str, name: str, value: Any, metadata: dict[str, Any]) -> None:
        for reporter in self.reporters:
            try:
                getattr(reporter, method)(name, value, **metadata)
            except Exception as e:
                log.error(
                    "Telemetry reporter '%s' failed: %s",
                    type(reporter).__name__,
                    e,
                    exc_info=True,
                )


_DISABLED = ParserTelemetry()


def TelemetryContext(*reporters: TelemetryReporter) -> ParserTelemetry:  # noqa: N802
    """Return a telemetry sink.

    Returns the shared disabled instance unless telemetry is switched on and
    reporters were given.
    """
    if _TELEMETRY_ENABLED and reporters:
        return ParserTelemetry(*reporters)
    return _DISABLED


class InMemoryReporter:
    """Collects everything it receives; handy in tests and notebooks."""

    def __init__(self) -> None:
        self.timings: dict[str, list[float]] = {}
        self.counts: dict[str, int] = {}

    def record_timing(self, name: str, seconds: float, **metadata: Any) -> None:  # noqa: ARG002
        self.timings.setdefault(name, []).append(seconds)

    def record_count(self, name: str, value: int, **metadata: Any) -> None:  # noqa: ARG002
        self.counts[name] = self.counts.get(name, 0) + value
