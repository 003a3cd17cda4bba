"""Progress reporting port. Purely observational."""

from __future__ import annotations

from typing import Protocol


class Activity(Protocol):
    def start(self) -> None: ...

    def set_status(self, status: str) -> None: ...

    def end(self) -> None: ...


class ActivityReporter(Protocol):
    def activity(self, name: str) -> Activity: ...


__all__ = ["Activity", "ActivityReporter"]
