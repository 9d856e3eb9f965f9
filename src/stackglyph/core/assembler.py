"""Assembly of display traces from host exceptions.

The assembler walks an exception and its chain of causes through the
``ThrowableView`` protocol, rewrites every class and method name and links
the results into a ``StackTrace``.

The host does not promise that a cause chain ends, so the walk is bounded:
it stops at the first cause it has already visited, and after
``max_cause_depth`` causes. Either way the chain is cut short and a warning
is logged; assembly itself never fails on a malformed chain.
"""

from __future__ import annotations

import structlog

from stackglyph.core.frame_builder import NO_FILE, build_frame_from
from stackglyph.core.rewriter import rewrite
from stackglyph.interfaces.throwable import ThrowableView
from stackglyph.models.message import Message
from stackglyph.models.trace import StackTrace
from stackglyph.utils.logging import LogEventNames

log = structlog.get_logger()

DEFAULT_MAX_CAUSE_DEPTH = 64


class TraceAssembler:
    """Builds ``StackTrace`` values from ``ThrowableView`` implementations.

    Example:
        assembler = TraceAssembler(max_cause_depth=16)
        trace = assembler.assemble(view)
        print(trace.signature)
    """

    def __init__(
        self,
        max_cause_depth: int = DEFAULT_MAX_CAUSE_DEPTH,
        no_file_placeholder: str = NO_FILE,
    ) -> None:
        """Initialize the TraceAssembler.

        Args:
            max_cause_depth: Maximum number of causes kept below the top
                exception
            no_file_placeholder: File text for frames without a source file

        Raises:
            ValueError: If max_cause_depth is negative
        """
        if max_cause_depth < 0:
            raise ValueError(f"max_cause_depth must be >= 0, got {max_cause_depth}")
        self.max_cause_depth = max_cause_depth
        self.no_file_placeholder = no_file_placeholder

    def assemble(self, view: ThrowableView) -> StackTrace:
        """Assemble a trace for ``view`` and its causes.

        Args:
            view: The outermost exception

        Returns:
            StackTrace whose cause chain is finite and acyclic
        """
        chain = self._walk(view)

        # chain always holds at least ``view``
        trace = self._assemble_one(chain[-1], cause=None)
        for item in reversed(chain[:-1]):
            trace = self._assemble_one(item, cause=trace)

        log.debug(
            LogEventNames.TRACE_ASSEMBLED,
            class_name=trace.class_name,
            frames=len(trace.frames),
            causes=len(chain) - 1,
        )
        return trace

    def _walk(self, view: ThrowableView) -> list[ThrowableView]:
        """Collect ``view`` and its causes, outermost first, with guards."""
        chain = [view]
        seen = {id(view)}
        current = view.cause

        while current is not None:
            if id(current) in seen:
                log.warning(
                    LogEventNames.CAUSE_CHAIN_TRUNCATED,
                    reason="cycle",
                    depth=len(chain),
                    type_name=current.type_name,
                )
                break
            if len(chain) > self.max_cause_depth:
                log.warning(
                    LogEventNames.CAUSE_CHAIN_TRUNCATED,
                    reason="max_depth",
                    depth=len(chain),
                    max_cause_depth=self.max_cause_depth,
                )
                break
            chain.append(current)
            seen.add(id(current))
            current = current.cause

        return chain

    def _assemble_one(self, view: ThrowableView, cause: StackTrace | None) -> StackTrace:
        """Assemble a single exception, attaching an already-built cause."""
        full_name = rewrite(view.type_name)
        component, _, class_name = full_name.rpartition(".")

        message = view.structured_message
        if message is None:
            message = Message.of(view.message or "")

        frames = tuple(
            build_frame_from(raw, no_file_placeholder=self.no_file_placeholder)
            for raw in view.frames
        )

        return StackTrace(
            component=component,
            class_name=class_name,
            message=message,
            frames=frames,
            cause=cause,
        )


_default_assembler = TraceAssembler()


def assemble(view: ThrowableView) -> StackTrace:
    """Assemble ``view`` with the default limits."""
    return _default_assembler.assemble(view)
