"""Reader for the ``/proc/net/dev`` style cumulative counter table."""

from __future__ import annotations

import enum
import logging
import time
from contextlib import closing
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Union

from .counter_snapshot import CounterSnapshot
from .line_parser import MalformedRowError, parse_interface_line, split_label
from .utils import HEADER_LINES, PROC_NET_DEV

logger = logging.getLogger(__name__)


class CounterSourceError(RuntimeError):
    """Raised when the counter source cannot be opened or read."""


class ReadStatus(enum.Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    SOURCE_ERROR = "source_error"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class ReadResult:
    """Outcome of one read attempt; ``snapshot`` is set only for ``OK``."""

    status: ReadStatus
    interface: str
    snapshot: Optional[CounterSnapshot] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is ReadStatus.OK

    def describe(self) -> str:
        if self.status is ReadStatus.OK:
            return f"read counters for '{self.interface}'"
        if self.status is ReadStatus.NOT_FOUND:
            return f"interface '{self.interface}' not found"
        return self.error or self.status.value


class CounterSource:
    """Opens the counter table fresh on every read."""

    def __init__(
        self,
        path: Union[str, Path] = PROC_NET_DEV,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.path = Path(path)
        self._clock = clock

    # ------------------------------------------------------------------
    def rows(self) -> Iterator[str]:
        """Yield the data rows, skipping the fixed header."""
        try:
            handle = self.path.open("r", encoding="ascii", errors="replace")
        except OSError as exc:
            raise CounterSourceError(f"Cannot open {self.path}: {exc.strerror or exc}") from exc

        with handle:
            try:
                for line_number, line in enumerate(handle, 1):
                    if line_number <= HEADER_LINES:
                        continue
                    yield line
            except OSError as exc:
                raise CounterSourceError(f"Failed reading {self.path}: {exc.strerror or exc}") from exc

    # ------------------------------------------------------------------
    def read(self, interface: str) -> ReadResult:
        """Look up *interface* and return a complete snapshot or a failure outcome."""
        try:
            with closing(self.rows()) as rows:
                for line in rows:
                    snapshot = parse_interface_line(line, interface, self._clock())
                    if snapshot is not None:
                        return ReadResult(ReadStatus.OK, interface, snapshot=snapshot)
        except CounterSourceError as exc:
            logger.debug("Counter source unavailable", exc_info=True)
            return ReadResult(ReadStatus.SOURCE_ERROR, interface, error=str(exc))
        except MalformedRowError as exc:
            return ReadResult(ReadStatus.MALFORMED, interface, error=str(exc))

        return ReadResult(ReadStatus.NOT_FOUND, interface)

    def list_interfaces(self) -> List[str]:
        labels: List[str] = []
        for line in self.rows():
            label = split_label(line)
            if label is not None:
                labels.append(label)
        return labels


__all__ = ["CounterSource", "CounterSourceError", "ReadResult", "ReadStatus"]
