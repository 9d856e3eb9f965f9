"""Data models and value objects."""

from .legend import GLYPH_LEGEND, glyphs_in
from .message import Message
from .name import (
    EmptyName,
    InvalidChar,
    InvalidStart,
    NameErrorReason,
    ReservedWord,
    ValidatedName,
)
from .trace import Frame, Method, StackTrace

__all__ = [
    # Trace models
    "Method",
    "Frame",
    "StackTrace",
    "Message",
    # Name models
    "ValidatedName",
    "NameErrorReason",
    "InvalidChar",
    "InvalidStart",
    "EmptyName",
    "ReservedWord",
    # Legend
    "GLYPH_LEGEND",
    "glyphs_in",
]
