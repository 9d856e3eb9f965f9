"""Data models for validated fully-qualified names."""

from __future__ import annotations

import string
from dataclasses import dataclass

NAME_CHARS = frozenset(string.ascii_letters + string.digits + "_")

JAVA_KEYWORDS = frozenset(
    {
        "abstract", "assert", "boolean", "break", "byte", "case", "catch",
        "char", "class", "const", "continue", "default", "do", "double",
        "else", "enum", "extends", "false", "final", "finally", "float",
        "for", "goto", "if", "implements", "import", "instanceof", "int",
        "interface", "long", "native", "new", "null", "package", "private",
        "protected", "public", "return", "short", "static", "strictfp",
        "super", "switch", "synchronized", "this", "throw", "throws",
        "transient", "true", "try", "void", "volatile", "while",
    }
)  # fmt: skip


@dataclass(frozen=True)
class InvalidChar:
    """A segment contains a character outside ``[A-Za-z0-9_]``."""

    char: str

    def describe(self) -> str:
        return f"a package name may not contain the character {self.char}"


@dataclass(frozen=True)
class InvalidStart:
    """A segment starts with a decimal digit."""

    char: str

    def describe(self) -> str:
        return f"a package name may not start with the character {self.char}"


@dataclass(frozen=True)
class EmptyName:
    """A segment is empty (leading, trailing or doubled dot, or empty input)."""

    def describe(self) -> str:
        return "a package name cannot be empty"


@dataclass(frozen=True)
class ReservedWord:
    """A segment is a reserved keyword."""

    word: str

    def describe(self) -> str:
        return f"a package name cannot be the Java keyword, {self.word}"


NameErrorReason = InvalidChar | InvalidStart | EmptyName | ReservedWord


def check_segment(segment: str) -> NameErrorReason | None:
    """Return why ``segment`` is invalid, or None if it is fine.

    Rules are checked in order and the first failure wins.
    """
    if not segment:
        return EmptyName()
    if segment in JAVA_KEYWORDS:
        return ReservedWord(segment)
    for char in segment:
        if char not in NAME_CHARS:
            return InvalidChar(char)
    if segment[0] in string.digits:
        return InvalidStart(segment[0])
    return None


@dataclass(frozen=True)
class ValidatedName:
    """A dot-separated name that passed validation.

    Instances are produced by ``stackglyph.core.name_validator.validate``;
    building one directly from empty or invalid segments raises ValueError.
    """

    segments: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.segments:
            raise ValueError("ValidatedName needs at least one segment")
        for segment in self.segments:
            reason = check_segment(segment)
            if reason is not None:
                raise ValueError(f"Invalid segment {segment!r}: {reason.describe()}")

    @property
    def text(self) -> str:
        """The full dotted name."""
        return ".".join(self.segments)

    @property
    def class_name(self) -> str:
        """The last segment."""
        return self.segments[-1]

    @property
    def package_name(self) -> str:
        """Every segment but the last, joined by dots."""
        return ".".join(self.segments[:-1])

    def __str__(self) -> str:
        return self.text
