"""Minimum-interval throttle for outbound geocoding calls."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Callable

from ..domain.errors import ConfigurationError
from ..domain.models import ResolverState


@dataclass
class RateLimiter:
    """Spaces successive ``wait()`` returns by at least ``min_interval_seconds``.

    The read-compare-sleep-update of ``state.last_request_at`` happens
    under one lock, so threads sharing a limiter are serialized and the
    interval holds across all of them.

    Attributes:
        min_interval_seconds: Minimum gap between calls; 0 disables throttling
        clock: Monotonic time source, in seconds
        sleep: Blocking sleep function
    """

    min_interval_seconds: float = 0.0
    clock: Callable[[], float] = field(default=time.monotonic, repr=False)
    sleep: Callable[[float], None] = field(default=time.sleep, repr=False)

    state: ResolverState = field(init=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.min_interval_seconds < 0:
            raise ConfigurationError(
                f"Minimum interval must be >= 0, got {self.min_interval_seconds}",
                setting_name="min_interval_seconds",
                expected_type="float >= 0",
            )
        self.state = ResolverState(min_interval_seconds=self.min_interval_seconds)
        self._logger = logging.getLogger(__name__)

    def wait(self) -> float:
        """Block until the next call is allowed.

        Returns:
            Seconds spent sleeping.
        """
        with self._lock:
            waited = 0.0
            last = self.state.last_request_at
            if last is not None and self.state.min_interval_seconds > 0:
                deficit = self.state.min_interval_seconds - (self.clock() - last)
                if deficit > 0:
                    self._logger.debug(
                        "Rate limit wait", extra={"seconds": round(deficit, 3)}
                    )
                    self.sleep(deficit)
                    waited = deficit
            self.state.last_request_at = self.clock()
            return waited
