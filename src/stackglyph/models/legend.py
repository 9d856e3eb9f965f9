"""Meanings of the symbols that appear in rewritten identifiers."""

from types import MappingProxyType

GLYPH_LEGEND = MappingProxyType(
    {
        "λ": "anonymous function",
        "α": "anonymous class",
        "ι": "initialization",
        "ς": "super reference",
        "⋮ε": "extension method",
        "ϕ": "direct",
        "⋮π": "package file",
        "ⲛ": "class initializer",
        "ℓ": "lazy initializer",
        "δ": "default argument",
        "′": "renamed to avoid a name clash",
    }
)


def glyphs_in(text: str) -> dict[str, str]:
    """Return the legend entries for every glyph that occurs in ``text``.

    Useful for printing a key underneath a rendered trace that only explains
    the symbols actually shown.
    """
    return {glyph: meaning for glyph, meaning in GLYPH_LEGEND.items() if glyph in text}
