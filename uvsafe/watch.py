"""Refresh loop: re-fetches the UV report for one location on a fixed interval.

Each cycle replaces the previous report wholesale. Failed cycles back off
exponentially up to a cap; SIGINT/SIGTERM stop the loop after the current
cycle.
"""

import logging
import signal
import time
from collections.abc import Callable

from uvsafe.ingest.uv_fetcher import UvFetcher
from uvsafe.models.uv import UvReport

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 300  # 5 minutes
MAX_BACKOFF = 1800


class RefreshLoop:
    def __init__(
        self,
        fetcher: UvFetcher,
        lat: float,
        lng: float,
        interval: int = DEFAULT_INTERVAL,
        max_backoff: int = MAX_BACKOFF,
        skin_type: int | None = None,
        location_label: str | None = None,
        on_report: Callable[[UvReport], None] | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if interval < 1:
            raise ValueError(f"Refresh interval must be at least 1 second, got {interval}")
        self.fetcher = fetcher
        self.lat = lat
        self.lng = lng
        self.interval = interval
        self.max_backoff = max_backoff
        self.skin_type = skin_type
        self.location_label = location_label
        self.on_report = on_report
        self._sleep = sleep
        self._running = False
        self._consecutive_failures = 0
        self.latest: UvReport | None = None
        self.cycles = 0

    def run(self, max_cycles: int | None = None) -> None:
        """Run until stopped, or for ``max_cycles`` cycles when given."""
        self._running = True
        logger.info(
            "Refresh loop started for %.4f,%.4f every %ds",
            self.lat, self.lng, self.interval,
        )
        try:
            while self._running:
                ok = self.refresh_once()
                if max_cycles is not None and self.cycles >= max_cycles:
                    break
                self._wait(self.next_delay(ok))
        except KeyboardInterrupt:
            logger.info("Refresh loop interrupted by keyboard")
        finally:
            self._running = False
            logger.info("Refresh loop stopped after %d cycles", self.cycles)

    def refresh_once(self) -> bool:
        """Fetch one report. Returns True on success."""
        self.cycles += 1
        try:
            report = self.fetcher.fetch(
                self.lat,
                self.lng,
                skin_type=self.skin_type,
                location_label=self.location_label,
            )
        except Exception:
            self._consecutive_failures += 1
            logger.exception("Refresh #%d failed", self.cycles)
            return False

        self._consecutive_failures = 0
        self.latest = report
        if self.on_report is not None:
            self.on_report(report)
        return True

    def next_delay(self, ok: bool) -> int:
        if ok:
            return self.interval
        backoff = min(self.interval * (2**self._consecutive_failures), self.max_backoff)
        logger.warning(
            "Refresh failed (%d consecutive), backing off %ds",
            self._consecutive_failures, backoff,
        )
        return backoff

    def stop(self) -> None:
        self._running = False

    def install_signal_handlers(self) -> None:
        """Stop gracefully on SIGTERM and SIGINT."""
        def _stop(signum: int, frame: object) -> None:
            logger.info("Received %s, stopping", signal.Signals(signum).name)
            self.stop()

        signal.signal(signal.SIGTERM, _stop)
        signal.signal(signal.SIGINT, _stop)

    def _wait(self, seconds: float) -> None:
        # Sleep in 1-second increments so a stop request is noticed quickly.
        remaining = float(seconds)
        while self._running and remaining > 0:
            step = min(1.0, remaining)
            self._sleep(step)
            remaining -= step
