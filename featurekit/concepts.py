"""Runtime checks that classify Python types by the operations they support.

Each predicate takes a class, or a parameterised generic such as ``list[int]``,
and answers whether values of that type offer a given capability. Anything
that is not a type is rejected with ``False``.

Some checks need a sample value. They build one by calling the type with no
arguments, so they should only be given types whose constructors are free of
side effects.
"""

from __future__ import annotations

import copy
import numbers
import operator
import typing
from collections.abc import Iterable, MutableSequence, Sized

_ORDERING_METHODS = ("__lt__", "__le__", "__gt__", "__ge__")
_ORDERING_OPERATORS = (operator.lt, operator.le, operator.gt, operator.ge)
_NO_INSTANCE = object()


def _as_class(tp):
    """Return the runtime class behind ``tp``, or None if it has none."""
    origin = typing.get_origin(tp)
    if origin is not None:
        tp = origin
    return tp if isinstance(tp, type) else None


def _default_instance(cls):
    """Build a value of ``cls`` with no arguments, or return ``_NO_INSTANCE``."""
    try:
        return cls()
    except Exception:
        return _NO_INSTANCE


def _class_arguments(tp):
    """Yield the type arguments of a generic that resolve to classes."""
    for argument in typing.get_args(tp):
        if _as_class(argument) is not None:
            yield argument


def _closed_under(tp, method_name, op):
    cls = _as_class(tp)
    if cls is None or not callable(getattr(cls, method_name, None)):
        return False
    sample = _default_instance(cls)
    if sample is _NO_INSTANCE:
        return True
    try:
        result = op(sample, sample)
    except Exception:
        return False
    return type(result) is cls


def is_arithmetic_type(tp):
    """Return True for integral and floating-point types."""
    cls = _as_class(tp)
    return cls is not None and issubclass(cls, (numbers.Integral, float))


def is_addable_type(tp):
    """Return True if adding two values of ``tp`` gives a value of ``tp``."""
    return _closed_under(tp, "__add__", operator.add)


def is_subtractable_type(tp):
    """Return True if subtracting two values of ``tp`` gives a value of ``tp``."""
    return _closed_under(tp, "__sub__", operator.sub)


def is_numeric_type(tp):
    """Return True for arithmetic types closed under addition and subtraction."""
    return is_arithmetic_type(tp) and is_addable_type(tp) and is_subtractable_type(tp)


def is_iterable_container(tp):
    """Return True for types that can be both iterated and measured with len()."""
    cls = _as_class(tp)
    return cls is not None and issubclass(cls, Iterable) and issubclass(cls, Sized)


def is_range_container(tp):
    """Return True for any iterable type."""
    cls = _as_class(tp)
    return cls is not None and issubclass(cls, Iterable)


def is_sortable_container(tp):
    """Return True for mutable sequences whose elements (if given) are ordered."""
    cls = _as_class(tp)
    if cls is None or not issubclass(cls, MutableSequence):
        return False
    return all(is_comparable_type(argument) for argument in _class_arguments(tp))


def is_string_like_type(tp):
    """Return True for ``str`` and its subclasses."""
    cls = _as_class(tp)
    return cls is not None and issubclass(cls, str)


def is_printable_type(tp):
    """Return True if the type gives its values their own text form."""
    cls = _as_class(tp)
    if cls is None:
        return False
    return cls.__str__ is not object.__str__ or cls.__repr__ is not object.__repr__


def is_comparable_type(tp):
    """Return True if values of ``tp`` support all four ordering comparisons."""
    cls = _as_class(tp)
    if cls is None:
        return False
    for name in _ORDERING_METHODS:
        method = getattr(cls, name, None)
        if not callable(method) or method is getattr(object, name):
            return False
    if not all(is_comparable_type(argument) for argument in _class_arguments(tp)):
        return False
    sample = _default_instance(cls)
    if sample is _NO_INSTANCE:
        return True
    try:
        for op in _ORDERING_OPERATORS:
            op(sample, sample)
    except TypeError:
        return False
    return True


def is_default_constructible_type(tp):
    """Return True if the type can be called with no arguments."""
    cls = _as_class(tp)
    return cls is not None and _default_instance(cls) is not _NO_INSTANCE


def is_copyable_type(tp):
    """Return True if a default-constructed value of ``tp`` survives copy.copy()."""
    cls = _as_class(tp)
    if cls is None:
        return False
    sample = _default_instance(cls)
    if sample is _NO_INSTANCE:
        return False
    try:
        copy.copy(sample)
    except Exception:
        return False
    return True