# featurekit

A small collection of plain Python helpers, with no runtime dependencies.
It needs Python 3.10 or later.

## Modules

- `featurekit.concepts`: predicates that take a class (or a generic such as
  `list[int]`) and answer what its values support: `is_arithmetic_type`,
  `is_addable_type`, `is_subtractable_type`, `is_numeric_type`,
  `is_iterable_container`, `is_range_container`, `is_sortable_container`,
  `is_string_like_type`, `is_printable_type`, `is_comparable_type`,
  `is_default_constructible_type` and `is_copyable_type`. Anything that is not
  a type gives `False`. Some checks build a sample value by calling the type
  with no arguments, so pass only types whose constructors have no side
  effects.
- `featurekit.algorithms`: `sort_container` (sorts a mutable sequence in
  place, `TypeError` otherwise), `count_if`, `transform_to_list` and
  `find_min_max` (one pass, `ValueError` on an empty iterable).
- `featurekit.errors`: errors that record their severity and the file, line
  and function they were created in: `BaseError` (with
  `formatted_message()`), `ValidationError` (`field_name`), `ResourceError`
  (`resource_name`), `CalculationError` (`input_value`), plus
  `ErrorSeverity` and `SourceLocation`. `safe_execute(func)` returns `True`
  or logs the error to the `featurekit.errors` logger and returns `False`;
  `safe_execute_with_default(func, default)` returns `default` when `func`
  raises. `Result` holds either a value or a `BaseError` and offers
  `has_value`, `get_value`, `get_exception`, `visit`, `map` and `then`.
- `featurekit.randomgen`: `RandomGenerator`, seeded from system entropy or
  from a 32-bit seed, with `generate_int`, `generate_real`,
  `generate_int_vector`, `generate_real_vector`, `generate_bool`,
  `generate_normal`, `seed` and `seed_with_time`; plus `shuffle_container`
  (in place) and `sample_from_range` (without replacement, original order
  kept).
- `featurekit.timing`: `Timer` (`start`, `stop`, `elapsed(unit)` with units
  `ns`, `us`, `ms`, `s`, `elapsed_string`, `reset`; the clock can be
  injected), the `ScopedTimer` context manager, `BenchmarkResult`,
  `benchmark`, `format_result`, `print_result`, `time_function` and
  `profile_function`.
- `featurekit.strings`: `contains`, `to_string` (shortest text form of an
  integer, bool or float), `parse_int` (whole string, optional minus sign and
  digits only), `parse_float` (skips leading whitespace, ignores trailing
  text, understands hexadecimal, `inf` and `nan`), `concatenate_strings` and
  `filter_strings`. Failed conversions raise `StringConversionError`, whose
  `error` attribute is a `StringError`.

## Installation

```
pip install featurekit
```

## Examples

Chaining operations that can fail. A `Result` built from a `BaseError` is a
failure; any other value makes it a success:

```python
import math
from featurekit.errors import CalculationError, Result

def safe_divide(a, b):
    if b == 0:
        return Result(CalculationError("Division by zero", 0.0))
    return Result(a / b)

def safe_sqrt(x):
    if x < 0:
        return Result(CalculationError("Cannot calculate square root of negative number", x))
    return Result(math.sqrt(x))

chained = safe_divide(16.0, 4.0).then(safe_sqrt).map(lambda x: x + 1.0)
print(chained.get_value())      # 3.0

failed = safe_divide(10.0, 0.0).map(lambda x: x * 2)
print(failed.has_value())       # False
print(failed.get_exception())   # Division by zero
```

Reproducible random numbers:

```python
from featurekit.randomgen import RandomGenerator

gen = RandomGenerator(42)
roll = gen.generate_int(1, 6)
samples = gen.generate_real_vector(0.0, 1.0, 10)
```

Timing a block of code:

```python
from featurekit.timing import ScopedTimer, benchmark, print_result

with ScopedTimer("build list"):
    data = list(range(100_000))

print_result(benchmark("sum", lambda: sum(data), 100))
```

Parsing strings:

```python
from featurekit.strings import parse_int, StringConversionError

parse_int("42")        # 42
try:
    parse_int("42abc")
except StringConversionError as exc:
    print(exc.error)   # StringError.CONVERSION_ERROR
```

## What it does not do

featurekit is a library only: it installs no command-line program. It has no
container class of its own and no geometry types; the helpers work on
ordinary Python lists, sequences and iterables.

## Running the tests

```
pip install "featurekit[test]"
pytest
```