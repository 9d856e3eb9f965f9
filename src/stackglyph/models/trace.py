"""Data models for assembled stack traces."""

from __future__ import annotations

from dataclasses import dataclass, replace

from stackglyph.models.message import Message


@dataclass(frozen=True)
class Method:
    """A method reference, both names already rewritten to display form."""

    class_name: str
    method_name: str


@dataclass(frozen=True)
class Frame:
    """A single frame in an assembled stack trace."""

    method: Method
    file: str
    line: int | None = None  # None when the host reports an unknown line
    native: bool = False

    @property
    def location(self) -> str:
        """``file:line``, or just the file when the line is unknown."""
        if self.line is None:
            return self.file
        return f"{self.file}:{self.line}"


@dataclass(frozen=True)
class StackTrace:
    """An exception rendered into display form, with its cause chain.

    Frames are ordered from the throw site outward: ``frames[0]`` is the
    innermost (most recent) call. The trimming operations below rely on
    that ordering, return new traces and never touch ``cause``.
    """

    component: str  # e.g., "com.example"
    class_name: str  # e.g., "ParseError"
    message: Message
    frames: tuple[Frame, ...] = ()
    cause: StackTrace | None = None

    @property
    def full_class_name(self) -> str:
        """Component and class name joined back together."""
        if not self.component:
            return self.class_name
        return f"{self.component}.{self.class_name}"

    @property
    def innermost_frame(self) -> Frame:
        """The frame where the exception was thrown (first frame)."""
        if not self.frames:
            raise ValueError("Stack trace has no frames")
        return self.frames[0]

    @property
    def signature(self) -> str:
        """
        Short one-line description.

        Format: 'ClassName: message'
        """
        return f"{self.class_name}: {self.message.text}"

    @property
    def chain(self) -> tuple[StackTrace, ...]:
        """This trace followed by each of its causes, outermost first."""
        traces: list[StackTrace] = []
        current: StackTrace | None = self
        while current is not None:
            traces.append(current)
            current = current.cause
        return tuple(traces)

    def crop(self, class_name: str, method_name: str) -> StackTrace:
        """Keep the frames above the first call to ``class_name.method_name``.

        The matching frame itself is excluded. If no frame matches, every
        frame is kept.
        """
        target = Method(class_name, method_name)
        kept: list[Frame] = []
        for frame in self.frames:
            if frame.method == target:
                break
            kept.append(frame)
        return replace(self, frames=tuple(kept))

    def drop(self, n: int) -> StackTrace:
        """Remove the ``n`` frames closest to the throw site."""
        return replace(self, frames=self.frames[max(n, 0) :])

    def drop_from_end(self, n: int) -> StackTrace:
        """Remove the ``n`` frames closest to the program entry point."""
        keep = max(len(self.frames) - max(n, 0), 0)
        return replace(self, frames=self.frames[:keep])
