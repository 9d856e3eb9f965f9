"""Tests for the Python exception adapter."""

import pytest

from stackglyph.adapters.python_exception import PythonExceptionView, stack_trace
from stackglyph.core.assembler import TraceAssembler
from stackglyph.core.name_validator import validate
from stackglyph.utils.errors import InvalidNameError


def _raise_chained() -> None:
    try:
        raise KeyError("inner")
    except KeyError as e:
        raise ValueError("outer") from e


def _raise_implicit() -> None:
    try:
        raise KeyError("inner")
    except KeyError:
        raise RuntimeError("while handling")  # noqa: B904


def _raise_suppressed() -> None:
    try:
        raise KeyError("inner")
    except KeyError:
        raise RuntimeError("clean") from None


def _catch(func) -> BaseException:  # type: ignore[no-untyped-def]
    try:
        func()
    except Exception as e:
        return e
    raise AssertionError("expected an exception")


class TestStackTrace:
    """Tests for stack_trace on live exceptions."""

    def test_builtin_exception_names(self) -> None:
        """Test that built-in types live in the builtins component."""
        trace = stack_trace(_catch(_raise_chained))

        assert trace.component == "builtins"
        assert trace.class_name == "ValueError"
        assert trace.message.text == "outer"

    def test_frames_innermost_first(self) -> None:
        """Test frame order and contents."""
        trace = stack_trace(_catch(_raise_chained))

        innermost = trace.frames[0]
        assert innermost.method.method_name == "_raise_chained()"
        assert innermost.method.class_name.endswith("test_python_exception")
        assert innermost.file.endswith("test_python_exception.py")
        assert isinstance(innermost.line, int)
        assert innermost.native is False
        assert trace.frames[-1].method.method_name == "_catch()"

    def test_explicit_cause(self) -> None:
        """Test following raise ... from ..."""
        trace = stack_trace(_catch(_raise_chained))

        assert trace.cause is not None
        assert trace.cause.class_name == "KeyError"
        assert trace.cause.message.text == "'inner'"
        assert trace.cause.cause is None

    def test_implicit_context_followed(self) -> None:
        """Test that __context__ counts as the cause by default."""
        trace = stack_trace(_catch(_raise_implicit))

        assert trace.cause is not None
        assert trace.cause.class_name == "KeyError"

    def test_implicit_context_ignored_on_request(self) -> None:
        """Test that implicit context can be skipped."""
        trace = stack_trace(_catch(_raise_implicit), follow_context=False)
        assert trace.cause is None

    def test_suppressed_context(self) -> None:
        """Test that raise ... from None hides the context."""
        trace = stack_trace(_catch(_raise_suppressed))
        assert trace.cause is None

    def test_empty_message(self) -> None:
        """Test an exception without a message."""
        trace = stack_trace(ValueError())

        assert trace.message.text == ""
        assert trace.frames == ()

    def test_domain_error_message_verbatim(self) -> None:
        """Test that a StackGlyphError keeps its structured message."""
        with pytest.raises(InvalidNameError) as exc_info:
            validate("com.1bad")

        trace = stack_trace(exc_info.value)

        assert trace.component == "stackglyph.utils.errors"
        assert trace.class_name == "InvalidNameError"
        assert trace.message is exc_info.value.message

    def test_cyclic_causes_terminate(self) -> None:
        """Test that a hand-made cause cycle is cut."""
        a = ValueError("a")
        b = KeyError("b")
        a.__cause__ = b
        b.__cause__ = a

        trace = stack_trace(a)

        assert [t.class_name for t in trace.chain] == ["ValueError", "KeyError"]

    def test_custom_assembler(self) -> None:
        """Test passing an assembler with its own limits."""
        trace = stack_trace(_catch(_raise_chained), assembler=TraceAssembler(max_cause_depth=0))
        assert trace.cause is None


class TestPythonExceptionView:
    """Tests for the view itself."""

    def test_same_exception_same_view(self) -> None:
        """Test that a chain reuses views for repeated exceptions."""
        a = ValueError("a")
        a.__cause__ = a
        view = PythonExceptionView(a)

        assert view.cause is view

    def test_type_name_of_nested_class(self) -> None:
        """Test that qualified names of nested classes are kept."""

        class Local(Exception):
            pass

        view = PythonExceptionView(Local("x"))
        assert view.type_name.endswith(".test_type_name_of_nested_class.<locals>.Local")
