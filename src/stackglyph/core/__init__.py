"""Core rewriting and trace assembly.

This module exports:
- rewrite: Turns mangled identifiers into display form
- build_frame: Rewrites one raw frame
- TraceAssembler: Builds traces from exceptions and their causes
- validate: Checks fully-qualified class names
"""

from stackglyph.core.assembler import DEFAULT_MAX_CAUSE_DEPTH, TraceAssembler, assemble
from stackglyph.core.frame_builder import NO_FILE, build_frame, build_frame_from
from stackglyph.core.name_validator import is_valid, validate
from stackglyph.core.rewriter import TOKENS, Token, rewrite
from stackglyph.models.name import JAVA_KEYWORDS

__all__ = [
    "DEFAULT_MAX_CAUSE_DEPTH",
    "JAVA_KEYWORDS",
    "NO_FILE",
    "TOKENS",
    "Token",
    "TraceAssembler",
    "assemble",
    "build_frame",
    "build_frame_from",
    "is_valid",
    "rewrite",
    "validate",
]
