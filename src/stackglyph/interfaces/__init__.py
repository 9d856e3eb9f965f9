"""Protocol definitions for host runtime collaborators."""

from .throwable import RawFrame, ThrowableView

__all__ = ["RawFrame", "ThrowableView"]
