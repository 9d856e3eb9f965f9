"""Shared test fixtures for stackglyph."""

from collections.abc import Iterator

import pytest
import structlog

from stackglyph.models.message import Message
from stackglyph.models.trace import Frame, Method, StackTrace


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Restore structlog defaults so logging config never leaks between tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def five_frames() -> tuple[Frame, ...]:
    """Return five frames, innermost first, named C0.m0() .. C4.m4()."""
    return tuple(
        Frame(
            method=Method(f"com.example.C{i}", f"m{i}()"),
            file=f"C{i}.scala",
            line=10 * (i + 1),
        )
        for i in range(5)
    )


@pytest.fixture
def five_frame_trace(five_frames: tuple[Frame, ...]) -> StackTrace:
    """Return a trace with five frames and a frameless cause."""
    cause = StackTrace(
        component="java.io",
        class_name="IOException",
        message=Message.of("disk full"),
    )
    return StackTrace(
        component="com.example",
        class_name="ParseError",
        message=Message.of("unexpected token"),
        frames=five_frames,
        cause=cause,
    )
