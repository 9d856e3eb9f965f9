"""Rewriter for compiler-mangled identifiers.

Class and method names produced by the Scala compiler encode operators,
anonymous functions and other synthetic members into ASCII-safe tokens such
as ``$anonfun$`` or ``$plus$``. This module turns those names back into a
compact symbolic form:

- ``Foo$anonfun$bar$1``            -> ``Fooλbar₁``
- ``<init>`` (method)              -> ``ⲛ()``
- ``scala.runtime.java8.JFunction1$mcII$sp`` -> ``(Int => Int)``

The rewrite is purely textual. It never fails: anything it does not
recognise is copied through, and a stray ``$`` becomes a separator.

See ``stackglyph.models.legend`` for what each symbol means.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class Token:
    """One entry of the rewrite table.

    Attributes:
        text: Literal text to match at the current position.
        glyph: Replacement emitted when ``text`` matches.
        digits: Whether the characters that follow are rendered as subscript
            digits (an anonymous numeric suffix).
    """

    text: str
    glyph: str
    digits: bool = False


TOKENS: tuple[Token, ...] = (
    Token("<init>", "ⲛ"),
    Token("initial$", "ι"),
    Token("lzyINIT", "ℓ", digits=True),
    Token("super$", "ς"),
    Token("$_avoid_name_clash_$", "′"),
    Token("$amp$", "&"),
    Token("$anonfun$", "λ", digits=True),
    Token("$anon$", "α", digits=True),
    Token("$at$", "@"),
    Token("$bang$", "!"),
    Token("$bar$", "|"),
    Token("$bslash$", "\\"),
    Token("$colon$", ":"),
    Token("$default$", "δ"),
    Token("$direct$", "⋮ϕ"),
    Token("$div$", "/"),
    Token("$eq$", "="),
    Token("$extension$", "⋮ε"),
    Token("$greater$", ">"),
    Token("$hash$", "#"),
    Token("$less$", "<"),
    Token("$minus$", "-"),
    Token("$package$", "⋮π"),
    Token("$percent$", "%"),
    Token("$plus$", "+"),
    Token("$qmark$", "?"),
    Token("$tilde$", "~"),
    Token("$times$", "*"),
    Token("$up$", "^"),
)

SUBSCRIPTS = MappingProxyType(dict(zip("0123456789", "₀₁₂₃₄₅₆₇₈₉", strict=True)))

PRIMITIVES = MappingProxyType(
    {
        "Z": "Boolean",
        "I": "Int",
        "J": "Long",
        "V": "Unit",
        "S": "Short",
        "F": "Float",
        "C": "Char",
        "D": "Double",
        "L": "Any",
    }
)

CLASS_SEPARATOR = "#"
METHOD_SEPARATOR = "()."
CALL_SUFFIX = "()"

SPECIALIZED_FUNCTION_PREFIX = "scala.runtime.java8.JFunction"
SPECIALIZED_SUFFIX = "#sp"
SPECIALIZATION_MARKER = "#mc"
PROCEDURE_PREFIX = "scala.runtime.function.JProcedure"
MAX_PROCEDURE_ARITY = 22


def _index_tokens(tokens: tuple[Token, ...]) -> dict[str, tuple[Token, ...]]:
    """Group tokens by first character, longest first within each group."""
    index: dict[str, list[Token]] = {}
    for token in tokens:
        index.setdefault(token.text[0], []).append(token)
    return {
        first: tuple(sorted(group, key=lambda t: len(t.text), reverse=True))
        for first, group in index.items()
    }


_TOKEN_INDEX = _index_tokens(TOKENS)


def _match(name: str, idx: int) -> Token | None:
    """Return the longest token that matches ``name`` at ``idx``, if any."""
    for token in _TOKEN_INDEX.get(name[idx], ()):
        if name.startswith(token.text, idx):
            return token
    return None


def _scan(name: str, method: bool) -> str:
    """First pass: replace tokens left to right in a single scan.

    Each iteration either advances ``idx`` or leaves digit mode without
    advancing, and the latter cannot happen twice at the same position, so
    the loop is linear in ``len(name)``.
    """
    out: list[str] = []
    idx = 0
    digits = False
    length = len(name)

    while idx < length:
        char = name[idx]

        if digits:
            if char in SUBSCRIPTS:
                out.append(SUBSCRIPTS[char])
                idx += 1
                continue
            # Reprocess this character in normal mode
            digits = False

        token = _match(name, idx)
        if token is not None:
            out.append(token.glyph)
            idx += len(token.text)
            digits = token.digits
        elif char == "$":
            if idx + 1 < length and name[idx + 1] in SUBSCRIPTS:
                digits = True
            else:
                out.append(METHOD_SEPARATOR if method else CLASS_SEPARATOR)
            idx += 1
        else:
            out.append(char)
            idx += 1

    return "".join(out)


def primitive(tag: str) -> str:
    """Map a JVM primitive type tag to its Scala type name (``?`` if unknown)."""
    return PRIMITIVES.get(tag, "?")


def _arrow(domain: list[str], result: str) -> str:
    if len(domain) < 2:
        return f"({' => '.join([*domain, result])})"
    return f"(({', '.join(domain)}) => {result})"


def _specialized_function(rewritten: str) -> str:
    """Render a primitive-specialized function wrapper as its function type.

    ``scala.runtime.java8.JFunction2#mcIIJ#sp`` becomes ``((Int, Int) => Long)``.
    Names without the specialization marker are returned unchanged.
    """
    tags = rewritten[len(SPECIALIZED_FUNCTION_PREFIX) : -len(SPECIALIZED_SUFFIX)]
    marker = tags.find(SPECIALIZATION_MARKER)
    if marker <= 0:
        return rewritten

    types = [primitive(tag) for tag in tags[marker + len(SPECIALIZATION_MARKER) :]]
    if not types:
        return rewritten
    return _arrow(types[:-1], types[-1])


def _procedure(rewritten: str) -> str:
    """Render an n-ary procedure wrapper as ``(... => Unit)``.

    An arity that is not a plain ASCII number up to ``MAX_PROCEDURE_ARITY``
    counts as 0.
    """
    suffix = rewritten[len(PROCEDURE_PREFIX) :]
    arity = 0
    if suffix.isascii() and suffix.isdigit() and len(suffix) <= 2:
        arity = int(suffix)
    if arity > MAX_PROCEDURE_ARITY:
        arity = 0
    return _arrow(["Any"] * max(arity, 1), "Unit")


def rewrite(name: str, method: bool = False) -> str:
    """Rewrite a mangled class or method name into display form.

    Args:
        name: Raw identifier as reported by the runtime
        method: True if ``name`` is a method name. Unrecognised ``$``
            separators then render as ``().`` and the result gets a
            trailing ``()``.

    Returns:
        The rewritten identifier. This function never raises.

    Example:
        rewrite("Foo$anonfun$bar$1")      # "Fooλbar₁"
        rewrite("<init>", method=True)    # "ⲛ()"
    """
    rewritten = _scan(name, method)

    if rewritten.startswith(SPECIALIZED_FUNCTION_PREFIX) and rewritten.endswith(
        SPECIALIZED_SUFFIX
    ):
        rewritten = _specialized_function(rewritten)
    elif rewritten.startswith(PROCEDURE_PREFIX):
        rewritten = _procedure(rewritten)

    if method:
        rewritten += CALL_SUFFIX
    return rewritten
