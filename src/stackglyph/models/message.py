"""Structured messages carried by traces and domain errors."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Message:
    """A message made of literal text parts interleaved with substitutions.

    ``parts`` always has exactly one more element than ``substitutions``, so
    the rendered text is ``parts[0] + substitutions[0] + parts[1] + ...``.
    Keeping the substituted values apart lets a presentation layer highlight
    them without re-parsing the text.

    Example:
        msg = Message(("the name ", " is not valid"), ("1bad",))
        assert msg.text == "the name 1bad is not valid"
    """

    parts: tuple[str, ...] = ("",)
    substitutions: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if len(self.parts) != len(self.substitutions) + 1:
            raise ValueError(
                f"Message needs {len(self.substitutions) + 1} parts "
                f"for {len(self.substitutions)} substitutions, got {len(self.parts)}"
            )

    @classmethod
    def of(cls, text: str) -> Message:
        """Wrap plain text as a message with no substitutions."""
        return cls((text,), ())

    @property
    def text(self) -> str:
        """The fully rendered message text."""
        pieces = [self.parts[0]]
        for value, part in zip(self.substitutions, self.parts[1:], strict=True):
            pieces.append(value)
            pieces.append(part)
        return "".join(pieces)

    def __str__(self) -> str:
        return self.text
