"""ThrowableView adapter for live Python exceptions.

Lets a Python exception (and its ``__cause__``/``__context__`` chain) be
assembled into a ``StackTrace``:

    try:
        ...
    except Exception as exc:
        trace = stack_trace(exc)

Python frames have no class, so the frame's module name stands in as the
class name and the code object's qualified name as the method name.
"""

from __future__ import annotations

import traceback
from collections.abc import Sequence
from types import TracebackType

from ..core.assembler import TraceAssembler, assemble
from ..interfaces.throwable import RawFrame
from ..models.message import Message
from ..models.trace import StackTrace
from ..utils.errors import StackGlyphError


def _frames(tb: TracebackType | None) -> tuple[RawFrame, ...]:
    """Raw frames for a traceback, innermost first."""
    frames: list[RawFrame] = []
    for frame, lineno in traceback.walk_tb(tb):
        code = frame.f_code
        frames.append(
            RawFrame(
                class_name=frame.f_globals.get("__name__", ""),
                method_name=code.co_qualname,
                file=code.co_filename or None,
                line=lineno if lineno is not None else -1,
                native=False,
            )
        )
    frames.reverse()
    return tuple(frames)


class PythonExceptionView:
    """``ThrowableView`` over a ``BaseException``.

    Views for a chain share one registry keyed by exception identity, so the
    same exception always yields the same view object. The assembler relies
    on this to recognise a cause it has already visited.

    Attributes:
        exception: The wrapped exception
        follow_context: Whether to treat an implicit ``__context__`` as the
            cause when there is no explicit ``__cause__``
    """

    def __init__(
        self,
        exception: BaseException,
        follow_context: bool = True,
        _registry: dict[int, PythonExceptionView] | None = None,
    ) -> None:
        self.exception = exception
        self.follow_context = follow_context
        self._registry = _registry if _registry is not None else {}
        self._registry[id(exception)] = self

    @property
    def type_name(self) -> str:
        cls = type(self.exception)
        return f"{cls.__module__}.{cls.__qualname__}"

    @property
    def message(self) -> str | None:
        return str(self.exception) or None

    @property
    def structured_message(self) -> Message | None:
        if isinstance(self.exception, StackGlyphError):
            return self.exception.message
        return None

    @property
    def frames(self) -> Sequence[RawFrame]:
        return _frames(self.exception.__traceback__)

    @property
    def cause(self) -> PythonExceptionView | None:
        exc = self.exception
        cause = exc.__cause__
        if cause is None and self.follow_context and not exc.__suppress_context__:
            cause = exc.__context__
        if cause is None:
            return None

        view = self._registry.get(id(cause))
        if view is None:
            view = PythonExceptionView(cause, self.follow_context, self._registry)
        return view


def stack_trace(
    exception: BaseException,
    assembler: TraceAssembler | None = None,
    follow_context: bool = True,
) -> StackTrace:
    """Assemble a ``StackTrace`` for a Python exception.

    Args:
        exception: Exception to render
        assembler: Assembler to use (defaults to the module default)
        follow_context: Follow implicit ``__context__`` links

    Returns:
        StackTrace for ``exception`` and its causes
    """
    view = PythonExceptionView(exception, follow_context=follow_context)
    if assembler is None:
        return assemble(view)
    return assembler.assemble(view)
