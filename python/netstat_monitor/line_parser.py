"""Strict parser for a single ``<label>: v0 ... v15`` counter row."""

from __future__ import annotations

import re
from typing import Optional, Tuple

from .counter_snapshot import FIELD_COUNT, CounterSnapshot
from .utils import UINT64_MAX

_UNSIGNED = re.compile(r"[0-9]+\Z")


class MalformedRowError(ValueError):
    """Raised when a row for the requested interface violates the source format."""


def split_label(line: str) -> Optional[str]:
    """Return the trimmed label of *line*, or ``None`` when it carries no colon."""
    label, sep, _ = line.partition(":")
    if not sep:
        return None
    return label.strip()


def parse_counter_values(body: str) -> Tuple[int, ...]:
    tokens = body.split()
    if len(tokens) != FIELD_COUNT:
        raise MalformedRowError(
            f"expected {FIELD_COUNT} counter columns, found {len(tokens)}"
        )

    values = []
    for index, token in enumerate(tokens):
        if not _UNSIGNED.match(token):
            raise MalformedRowError(f"column {index} is not an unsigned integer: {token!r}")
        value = int(token)
        if value > UINT64_MAX:
            raise MalformedRowError(f"column {index} exceeds 64 bits: {token}")
        values.append(value)
    return tuple(values)


def parse_interface_line(
    line: str,
    interface: str,
    captured_at: float,
) -> Optional[CounterSnapshot]:
    """Parse *line* into a snapshot if it belongs to *interface*.

    Returns ``None`` when the row is for some other interface (its body is not
    inspected at all). A matching label with a bad body raises
    :class:`MalformedRowError`.
    """
    if split_label(line) != interface:
        return None

    body = line.partition(":")[2]

    try:
        values = parse_counter_values(body)
    except MalformedRowError as exc:
        raise MalformedRowError(f"malformed row for '{interface}': {exc}") from exc
    return CounterSnapshot.from_values(interface, values, captured_at)


__all__ = [
    "MalformedRowError",
    "split_label",
    "parse_counter_values",
    "parse_interface_line",
]
