"""Adapters for concrete host runtimes."""

from .python_exception import PythonExceptionView, stack_trace

__all__ = ["PythonExceptionView", "stack_trace"]
