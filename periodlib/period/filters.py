"""
Segment filters for the iteration engine.

A filter is a plain predicate ``(period) -> bool``; ``forward_if`` composes it
with a visitor at the call site.
"""

from __future__ import annotations

from typing import Any, Callable

from periodlib.conventions.types import TimeUnit

Predicate = Callable[[Any], bool]
Visitor = Callable[[Any], Any]


def full_units(count: int, unit: TimeUnit) -> Predicate:
    """Predicate matching segments exactly ``count`` whole units long."""
    unit = TimeUnit(unit)

    def is_full(period) -> bool:
        return period.length_in(unit) == count

    return is_full


def forward_if(predicate: Predicate, visitor: Visitor) -> Visitor:
    """Wrap ``visitor`` so it only sees segments accepted by ``predicate``.

    The visitor's return value is passed through, so a ``STOP`` still halts
    iteration. Rejected segments return None.
    """

    def filtered(period):
        if predicate(period):
            return visitor(period)
        return None

    return filtered
