"""Validation of dot-separated fully-qualified class names."""

from __future__ import annotations

import structlog

from stackglyph.models.name import ValidatedName, check_segment
from stackglyph.utils.errors import InvalidNameError
from stackglyph.utils.logging import LogEventNames

log = structlog.get_logger()


def validate(name: str) -> ValidatedName:
    """Validate a fully-qualified class name.

    Args:
        name: Dot-separated name, e.g. "com.example.Foo"

    Returns:
        ValidatedName for the given name

    Raises:
        InvalidNameError: On the first segment that breaks a rule
    """
    segments = tuple(name.split("."))

    for segment in segments:
        reason = check_segment(segment)
        if reason is not None:
            log.debug(
                LogEventNames.NAME_REJECTED,
                name=name,
                segment=segment,
                reason=reason.describe(),
            )
            raise InvalidNameError(name, reason)

    return ValidatedName(segments)


def is_valid(name: str) -> bool:
    """Check whether ``name`` would pass ``validate``."""
    return all(check_segment(segment) is None for segment in name.split("."))
