"""In-process fixed-window rate limiter for the assistant endpoints."""

import math
import random
import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional

from finbot.config.settings import Settings

DEFAULT_CLASS = "default"


@dataclass(frozen=True)
class RateLimitConfig:
    """Window length and admission budget for one operation class."""

    window_seconds: float
    max_requests: int


DEFAULT_RATE_LIMITS: dict[str, RateLimitConfig] = {
    "chat": RateLimitConfig(window_seconds=60, max_requests=15),
    "insights": RateLimitConfig(window_seconds=60, max_requests=30),
    DEFAULT_CLASS: RateLimitConfig(window_seconds=60, max_requests=60),
}


@dataclass
class RateLimitEntry:
    """Counter for one (operation class, caller) key."""

    count: int
    reset_time: float


@dataclass(frozen=True)
class RateLimitResult:
    """Outcome of a single admission check."""

    admitted: bool
    remaining: int
    reset_in: float  # seconds until the current window ends

    @property
    def headers(self) -> dict[str, str]:
        """Response headers advertising the caller's remaining budget."""
        return {
            "X-RateLimit-Remaining": str(self.remaining),
            "X-RateLimit-Reset": str(math.ceil(self.reset_in)),
        }


class RateLimiter:
    """
    Per-caller, per-operation-class fixed-window request counter.

    State lives only in this object: it is not shared between processes and
    is lost on restart. A rejected check never mutates the stored entry.
    Expired entries are swept opportunistically on a random fraction of calls.
    """

    def __init__(
        self,
        limits: Optional[dict[str, RateLimitConfig]] = None,
        clock: Callable[[], float] = time.monotonic,
        sweep_probability: float = 0.01,
        rng: Optional[random.Random] = None,
    ):
        self._limits = dict(limits) if limits is not None else dict(DEFAULT_RATE_LIMITS)
        self._limits.setdefault(DEFAULT_CLASS, DEFAULT_RATE_LIMITS[DEFAULT_CLASS])
        self._clock = clock
        self._sweep_probability = sweep_probability
        self._rng = rng or random.Random()
        self._entries: dict[tuple[str, str], RateLimitEntry] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Settings) -> "RateLimiter":
        """Build a limiter whose class table comes from settings."""
        window = settings.rate_limit_window_seconds
        return cls(
            limits={
                "chat": RateLimitConfig(window, settings.rate_limit_chat_max),
                "insights": RateLimitConfig(window, settings.rate_limit_insights_max),
                DEFAULT_CLASS: RateLimitConfig(window, settings.rate_limit_default_max),
            }
        )

    def config_for(self, operation_class: str) -> RateLimitConfig:
        """Return the config of a class, falling back to the default class."""
        return self._limits.get(operation_class, self._limits[DEFAULT_CLASS])

    def check_limit(
        self,
        identifier: str,
        operation_class: str = DEFAULT_CLASS,
    ) -> RateLimitResult:
        """Admit or reject one attempt by identifier for operation_class."""
        config = self.config_for(operation_class)
        key = (operation_class, identifier)

        with self._lock:
            now = self._clock()

            if self._rng.random() < self._sweep_probability:
                self._sweep_expired(now)

            entry = self._entries.get(key)

            if entry is None or now > entry.reset_time:
                self._entries[key] = RateLimitEntry(
                    count=1,
                    reset_time=now + config.window_seconds,
                )
                return RateLimitResult(
                    admitted=True,
                    remaining=config.max_requests - 1,
                    reset_in=config.window_seconds,
                )

            if entry.count >= config.max_requests:
                return RateLimitResult(
                    admitted=False,
                    remaining=0,
                    reset_in=entry.reset_time - now,
                )

            entry.count += 1
            return RateLimitResult(
                admitted=True,
                remaining=config.max_requests - entry.count,
                reset_in=entry.reset_time - now,
            )

    def sweep(self) -> int:
        """Delete every entry whose window has passed. Returns the number removed."""
        with self._lock:
            return self._sweep_expired(self._clock())

    def clear(self) -> None:
        """Forget all counters."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _sweep_expired(self, now: float) -> int:
        expired = [key for key, entry in self._entries.items() if now > entry.reset_time]
        for key in expired:
            del self._entries[key]
        return len(expired)
