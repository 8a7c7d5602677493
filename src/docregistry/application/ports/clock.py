"""Clock port - source of record timestamps."""

from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    """Port for the current time (timezone-aware, UTC)."""

    def now(self) -> datetime: ...
