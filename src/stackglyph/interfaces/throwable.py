"""Abstract interface for the host runtime's view of an exception."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from ..models.message import Message


@dataclass(frozen=True)
class RawFrame:
    """A stack frame exactly as the host runtime reports it.

    Names are still mangled and ``line`` is negative when unknown.
    """

    class_name: str
    method_name: str
    file: str | None = None
    line: int = -1
    native: bool = False


class ThrowableView(Protocol):
    """What the trace assembler needs to know about an exception.

    This protocol keeps the core independent of any particular runtime's
    exception representation. Adapters (see ``stackglyph.adapters``) provide
    implementations for concrete runtimes.
    """

    @property
    def type_name(self) -> str:
        """Fully-qualified, possibly mangled, name of the exception type."""
        ...

    @property
    def message(self) -> str | None:
        """Raw message text, or None if the exception has none."""
        ...

    @property
    def structured_message(self) -> Message | None:
        """
        Pre-built message for domain errors.

        When present it is used verbatim instead of wrapping ``message``.
        """
        ...

    @property
    def frames(self) -> Sequence[RawFrame]:
        """Raw frames ordered from the throw site outward."""
        ...

    @property
    def cause(self) -> ThrowableView | None:
        """The exception that caused this one, if any."""
        ...
