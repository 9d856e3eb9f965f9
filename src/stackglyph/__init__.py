"""Readable stack traces for compiler-mangled identifiers.

Typical use:

    from stackglyph import rewrite, stack_trace

    rewrite("Foo$anonfun$bar$1")   # "Fooλbar₁"
    trace = stack_trace(exc)       # StackTrace with rewritten frames
"""

from stackglyph._version import __version__
from stackglyph.adapters import PythonExceptionView, stack_trace
from stackglyph.core import TraceAssembler, assemble, build_frame, is_valid, rewrite, validate
from stackglyph.interfaces import RawFrame, ThrowableView
from stackglyph.models import (
    GLYPH_LEGEND,
    EmptyName,
    Frame,
    InvalidChar,
    InvalidStart,
    Message,
    Method,
    ReservedWord,
    StackTrace,
    ValidatedName,
    glyphs_in,
)
from stackglyph.utils.errors import ConfigError, InvalidNameError, StackGlyphError

__all__ = [
    "GLYPH_LEGEND",
    "ConfigError",
    "EmptyName",
    "Frame",
    "InvalidChar",
    "InvalidNameError",
    "InvalidStart",
    "Message",
    "Method",
    "PythonExceptionView",
    "RawFrame",
    "ReservedWord",
    "StackGlyphError",
    "StackTrace",
    "ThrowableView",
    "TraceAssembler",
    "ValidatedName",
    "__version__",
    "assemble",
    "build_frame",
    "glyphs_in",
    "is_valid",
    "rewrite",
    "stack_trace",
    "validate",
]
