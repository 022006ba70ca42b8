"""
Structured trace events for the numeric core.

The fit engine never prints. It reports input ranges, pivot choices,
overflow clamps and singular rows as TraceEvent records to an injectable
observer (see numericsplus.core.protocols.TraceObserver). Two observers
ship with the library:

    TraceRecorder   keeps the events in memory
    LoggingObserver forwards them to the stdlib logging module
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator


# Event kinds
INPUT_SUMMARY = 'input_summary'
DEGENERATE_INPUT = 'degenerate_input'
CLOSED_FORM = 'closed_form'
OVERFLOW_CLAMPED = 'overflow_clamped'
PIVOT = 'pivot'
SINGULAR_ROW = 'singular_row'
UPDATE_DISCARDED = 'update_discarded'
ZERO_DIAGONAL = 'zero_diagonal'
NON_FINITE_RESULT = 'non_finite_result'

ALL_EVENT_KINDS = frozenset({
    INPUT_SUMMARY,
    DEGENERATE_INPUT,
    CLOSED_FORM,
    OVERFLOW_CLAMPED,
    PIVOT,
    SINGULAR_ROW,
    UPDATE_DISCARDED,
    ZERO_DIAGONAL,
    NON_FINITE_RESULT,
})

# Kinds that indicate the result is approximate or a sentinel
WARNING_EVENT_KINDS = frozenset({
    DEGENERATE_INPUT,
    OVERFLOW_CLAMPED,
    SINGULAR_ROW,
    UPDATE_DISCARDED,
    ZERO_DIAGONAL,
    NON_FINITE_RESULT,
})


@dataclass(frozen=True)
class TraceEvent:
    """
    One diagnostic event.

    Attributes:
        kind: One of the module-level event kind constants
        data: Event payload of plain Python values (ints, floats, strings)
    """
    kind: str
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def is_warning(self) -> bool:
        return self.kind in WARNING_EVENT_KINDS

    def describe(self) -> str:
        """One-line rendering: 'kind key=value key=value'."""
        if not self.data:
            return self.kind
        details = " ".join(f"{k}={v!r}" for k, v in self.data.items())
        return f"{self.kind} {details}"


class TraceRecorder:
    """
    Observer that collects events in memory.

    Usage:
        recorder = TraceRecorder()
        polyfit(x, y, 3, observer=recorder)
        recorder.kinds()         # ['input_summary', 'pivot', 'pivot', 'pivot']
        recorder.of_kind('pivot')
    """

    def __init__(self):
        self.events: list[TraceEvent] = []

    def __call__(self, event: TraceEvent) -> None:
        self.events.append(event)

    def __len__(self) -> int:
        return len(self.events)

    def __iter__(self) -> Iterator[TraceEvent]:
        return iter(self.events)

    def kinds(self) -> list[str]:
        return [e.kind for e in self.events]

    def of_kind(self, kind: str) -> list[TraceEvent]:
        return [e for e in self.events if e.kind == kind]

    def clear(self) -> None:
        self.events.clear()


class LoggingObserver:
    """
    Observer that forwards events to a logging.Logger.

    Routine events (pivots, input summaries, closed forms) are logged at
    DEBUG; events in WARNING_EVENT_KINDS at WARNING.

    Args:
        logger: Target logger. Defaults to logging.getLogger('numericsplus.trace').
    """

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger if logger is not None else logging.getLogger('numericsplus.trace')

    def __call__(self, event: TraceEvent) -> None:
        level = logging.WARNING if event.is_warning else logging.DEBUG
        self.logger.log(level, "%s", event.describe())


class Tracer:
    """
    Emission helper used inside the solver.

    Wraps an optional observer so that call sites stay a single line and
    cost nothing when no observer is attached. Also keeps a tally of the
    warning-level events for the Result.warnings tuple.
    """

    def __init__(self, observer: Callable[[TraceEvent], None] | None = None):
        self._observer = observer
        self.warnings: list[str] = []

    @property
    def enabled(self) -> bool:
        return self._observer is not None

    def emit(self, kind: str, **data: Any) -> None:
        event = TraceEvent(kind=kind, data=data)
        if event.is_warning:
            self.warnings.append(event.describe())
        if self._observer is not None:
            self._observer(event)
