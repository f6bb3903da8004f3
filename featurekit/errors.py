"""Error types that carry a severity and the place they were raised from.

Also provides helpers that run callables while containing their errors, and
``Result``, a value-or-error holder for code that prefers returning failures
to raising them.
"""

from __future__ import annotations

import enum
import inspect
import logging
import os
from dataclasses import dataclass

__all__ = [
    "ErrorSeverity",
    "SourceLocation",
    "BaseError",
    "ValidationError",
    "ResourceError",
    "CalculationError",
    "safe_execute",
    "safe_execute_with_default",
    "Result",
]

_log = logging.getLogger(__name__)


def _normalised(path):
    return os.path.normcase(os.path.abspath(path))


_THIS_FILE = _normalised(__file__)


class ErrorSeverity(enum.IntEnum):
    """How serious an error is, from least to most severe."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    FATAL = 5

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class SourceLocation:
    """A file, line and function in the calling code."""

    file_name: str
    line: int
    function_name: str

    @classmethod
    def current(cls):
        """Return the location of the nearest caller outside this module."""
        frame = inspect.currentframe()
        try:
            while frame is not None and _normalised(frame.f_code.co_filename) == _THIS_FILE:
                frame = frame.f_back
            if frame is None:
                return cls("<unknown>", 0, "<unknown>")
            return cls(frame.f_code.co_filename, frame.f_lineno, frame.f_code.co_name)
        finally:
            del frame


class BaseError(Exception):
    """Error with a message, a severity and the location it was created at."""

    def __init__(self, message, severity=ErrorSeverity.ERROR, location=None):
        super().__init__(str(message))
        self.message = str(message)
        self.severity = ErrorSeverity(severity)
        self.location = location if location is not None else SourceLocation.current()

    def __str__(self):
        return self.message

    def formatted_message(self):
        """Return ``"file:line - function: message"``."""
        loc = self.location
        return f"{loc.file_name}:{loc.line} - {loc.function_name}: {self.message}"


class ValidationError(BaseError):
    """Invalid input, optionally naming the field that failed."""

    def __init__(self, message, field_name=None, location=None):
        super().__init__(
            message,
            ErrorSeverity.ERROR,
            location if location is not None else SourceLocation.current(),
        )
        self.field_name = field_name


class ResourceError(BaseError):
    """Failure involving an external resource, optionally naming it."""

    def __init__(self, message, resource_name=None, location=None):
        super().__init__(
            message,
            ErrorSeverity.ERROR,
            location if location is not None else SourceLocation.current(),
        )
        self.resource_name = resource_name


class CalculationError(BaseError):
    """Numerical failure, keeping the input value that caused it."""

    def __init__(self, message, input_value=0.0, location=None):
        super().__init__(
            message,
            ErrorSeverity.ERROR,
            location if location is not None else SourceLocation.current(),
        )
        self.input_value = float(input_value)


def _log_error(error):
    _log.error("[%s] %s", error.severity, error.formatted_message())


def safe_execute(func):
    """Call ``func()``; return True on success, or log the error and return False."""
    try:
        func()
    except BaseError as error:
        _log_error(error)
        return False
    except Exception as error:
        _log.error("Standard exception: %s", error)
        return False
    return True


def safe_execute_with_default(func, default):
    """Return ``func()``, or ``default`` if it raises."""
    try:
        return func()
    except Exception:
        return default


class Result:
    """Holds either a successful value or a ``BaseError``.

    ``Result(value)`` is a success unless ``value`` is a ``BaseError``, in
    which case it is a failure carrying that error.
    """

    __slots__ = ("_value", "_error")

    def __init__(self, value):
        if isinstance(value, BaseError):
            self._value = None
            self._error = value
        else:
            self._value = value
            self._error = None

    def __repr__(self):
        if self._error is None:
            return f"Result({self._value!r})"
        return f"Result({type(self._error).__name__}({self._error.message!r}))"

    def has_value(self):
        """Return True if this holds a value rather than an error."""
        return self._error is None

    def get_value(self):
        """Return the value, or raise the held error."""
        if self._error is not None:
            raise self._error
        return self._value

    def get_exception(self):
        """Return the held error; raise ``BaseError`` if this is a success."""
        if self._error is None:
            raise BaseError("No exception in successful result")
        return self._error

    def visit(self, visitor):
        """Call ``visitor`` with whichever of value or error is held."""
        return visitor(self._value if self._error is None else self._error)

    def map(self, func):
        """Return a Result of ``func(value)``, or pass the error along."""
        if self._error is not None:
            return Result(self._error)
        return Result(func(self._value))

    def then(self, func):
        """Return ``func(value)`` (itself a Result), or pass the error along."""
        if self._error is not None:
            return Result(self._error)
        return func(self._value)