"""Navigation events exchanged with a client-side history manager."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum


class Operation(Enum):
    """History operation carried by a navigation event."""

    PUSH = "PUSH"
    POP = "POP"


@dataclass(frozen=True)
class NavigationEvent:
    """A single push or pop of a named route.

    Attributes:
        operation: Whether the route was pushed onto or popped off the history.
        name: Dotted route name, a key of the route table.
        params: Parameter values the route was navigated with. Left out of
            the hash so events stay hashable.
    """

    operation: Operation
    name: str
    params: Mapping[str, str] = field(default_factory=dict, hash=False)


def is_terminal_route(
    previous_event: NavigationEvent | None,
    event: NavigationEvent,
) -> bool:
    """Check whether event and previous_event define a terminal route.

    A terminal route is a POP that exactly cancels the PUSH of the same
    route name that came right before it.

    Examples:
        (None, POP "x") -> False
        (PUSH "x", POP "x") -> True
        (PUSH "x", POP "y") -> False
        (POP "x", POP "x") -> False
    """
    if previous_event is None:
        return False

    if previous_event.operation is Operation.PUSH and event.operation is Operation.POP:
        return previous_event.name == event.name
    return False
