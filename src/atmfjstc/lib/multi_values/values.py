"""
Containers and helpers for representing the multiple values produced by a single call.

Python has no dedicated multiple-value return mechanism; functions simply return a tuple (``return q, r``). This module
formalizes that convention:

- A `Values` instance, or any plain `tuple`, is taken to hold several values, in order
- Anything else (including ``None``) is a single value
- Zero values are represented by an empty `Values` (or an empty tuple)

Whenever more values are requested than a call produced, the missing positions are filled with a placeholder. By
default this is the `ABSENT` token, which cannot be confused with any value a function may legitimately return (e.g.
``None`` or ``False``). Callers who prefer the looser, nil-padding behavior can pass ``missing=None`` instead.
"""

from typing import Any, Tuple

from atmfjstc.lib.py_lang_utils.token import Token

from atmfjstc.lib.multi_values.errors import ArityError


ABSENT = Token(str_='ABSENT', repr_='ABSENT')
"""
Token used in place of a value that a call did not produce, in places where None is a valid value.
"""


class Values(tuple):
    """
    An explicit container for the multiple values returned by a call.

    This behaves exactly like a tuple. It only exists so as to make the intent obvious at the return site, e.g.
    ``return values(quotient, remainder)``, and to make it possible to return a tuple as a *single* value by wrapping it,
    e.g. ``return values((1, 2))``.
    """

    def __repr__(self) -> str:
        return 'values(' + ', '.join(repr(item) for item in self) + ')'


def values(*items: Any) -> Values:
    """
    Packs any number of values (including zero) into a `Values` container.
    """
    return Values(items)


def value_list(result: Any) -> Tuple[Any, ...]:
    """
    Normalizes the result of a call into a tuple holding each of the values it produced.

    `Values` and plain tuples are unpacked, anything else counts as a single value.
    """
    if isinstance(result, tuple):
        return tuple(result)

    return (result,)


def nth_value(n: int, result: Any, missing: Any = ABSENT) -> Any:
    """
    Gets the `n`-th value (0-based) produced by a call, or `missing` if the call produced fewer values.

    Example::

        nth_value(1, divmod(42, 10))  # => 2
    """
    check_count(n, 'Value index')

    items = value_list(result)

    return items[n] if n < len(items) else missing


def pad_values(result: Any, count: int, missing: Any = ABSENT) -> Tuple[Any, ...]:
    """
    Gets exactly `count` values from the result of a call.

    Extra values are discarded, and if the call produced too few values, the remaining positions are filled with
    `missing`.
    """
    check_count(count, 'Value count')

    items = value_list(result)

    if len(items) >= count:
        return items[:count]

    return items + (missing,) * (count - len(items))


def check_count(count: Any, what: str = 'Count') -> int:
    # Note: bool is a subclass of int
    if not isinstance(count, int) or isinstance(count, bool):
        raise ArityError(f"{what} must be an integer, got {count!r}")
    if count < 0:
        raise ArityError(f"{what} must be non-negative, got {count}")

    return count
