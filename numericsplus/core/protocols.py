"""
Core protocols for NumericsPlus.

We use Protocol (structural typing) rather than ABC (nominal typing), so a
plain function, a bound method or a small class can all serve as an
observer without inheriting from anything.
"""

from typing import Protocol, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from numericsplus.core.trace import TraceEvent


@runtime_checkable
class TraceObserver(Protocol):
    """
    Sink for structured diagnostic events emitted by the numeric core.

    The solver calls the observer synchronously, once per event, in the
    order the events occur. Observers must not raise and cannot change
    the numeric result: the solver hands them copies of plain Python
    values, never its working buffers.

    Examples:
        >>> events = []
        >>> polyfit(x, y, 2, observer=events.append)

        >>> polyfit(x, y, 2, observer=LoggingObserver())
    """

    def __call__(self, event: 'TraceEvent') -> None:
        ...
