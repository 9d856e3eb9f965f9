"""Exception hierarchy for stackglyph.

Every error raised by this package derives from ``StackGlyphError`` and
carries a structured ``Message``. When such an error is itself assembled
into a ``StackTrace``, that message is used verbatim instead of being
rebuilt from ``str(error)``.
"""

from __future__ import annotations

from stackglyph.models.message import Message
from stackglyph.models.name import NameErrorReason


class StackGlyphError(Exception):
    """Base exception for all stackglyph errors.

    Attributes:
        message: Structured form of the error message.
    """

    def __init__(self, message: Message | str) -> None:
        if isinstance(message, str):
            message = Message.of(message)
        super().__init__(message.text)
        self.message = message


class InvalidNameError(StackGlyphError):
    """A fully-qualified name failed validation.

    Attributes:
        name: The rejected name, as given.
        reason: Which rule the first offending segment broke.
    """

    def __init__(self, name: str, reason: NameErrorReason) -> None:
        super().__init__(
            Message(
                ("the class name ", " is not valid because ", ""),
                (name, reason.describe()),
            )
        )
        self.name = name
        self.reason = reason


class ConfigError(StackGlyphError):
    """Configuration could not be loaded or is inconsistent."""
