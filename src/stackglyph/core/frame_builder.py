"""Conversion of raw host frames into display frames."""

from __future__ import annotations

from stackglyph.core.rewriter import rewrite
from stackglyph.interfaces.throwable import RawFrame
from stackglyph.models.trace import Frame, Method

NO_FILE = "[no file]"


def build_frame(
    class_name: str,
    method_name: str,
    file: str | None,
    line: int,
    native: bool,
    no_file_placeholder: str = NO_FILE,
) -> Frame:
    """Build a display frame from raw frame fields.

    Args:
        class_name: Mangled class name
        method_name: Mangled method name
        file: Source file name, or None if unknown
        line: Line number; negative when unknown
        native: Whether the frame is a native method
        no_file_placeholder: Text used when ``file`` is missing

    Returns:
        Frame with both names rewritten
    """
    return Frame(
        method=Method(rewrite(class_name), rewrite(method_name, method=True)),
        file=file if file is not None else no_file_placeholder,
        line=line if line >= 0 else None,
        native=native,
    )


def build_frame_from(raw: RawFrame, no_file_placeholder: str = NO_FILE) -> Frame:
    """Build a display frame from a ``RawFrame``."""
    return build_frame(
        raw.class_name,
        raw.method_name,
        raw.file,
        raw.line,
        raw.native,
        no_file_placeholder=no_file_placeholder,
    )
