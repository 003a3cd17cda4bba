"""Progress reporting through the standard logging module."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

log = logging.getLogger("gqlsource.activity")


@dataclass(slots=True)
class LoggingActivity:
    """Timed activity; repeated identical statuses are logged once."""

    name: str
    logger: logging.Logger = field(default=log)
    level: int = logging.INFO
    _started_at: float | None = field(default=None, init=False)
    _last_status: str | None = field(default=None, init=False)

    def start(self) -> None:
        self._started_at = time.monotonic()
        self.logger.log(self.level, "%s: started", self.name)

    def set_status(self, status: str) -> None:
        if status == self._last_status:
            return
        self._last_status = status
        self.logger.log(self.level, "%s: %s", self.name, status)

    def end(self) -> None:
        elapsed = time.monotonic() - self._started_at if self._started_at is not None else 0.0
        self.logger.log(self.level, "%s: finished in %.2fs", self.name, elapsed)

    @property
    def last_status(self) -> str | None:
        return self._last_status


@dataclass(slots=True)
class LoggingActivityReporter:
    prefix: str = "gqlsource"
    level: int = logging.INFO

    def activity(self, name: str) -> LoggingActivity:
        return LoggingActivity(name=f"[{self.prefix}] {name}", level=self.level)
