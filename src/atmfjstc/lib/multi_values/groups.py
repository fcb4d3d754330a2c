"""
Parsing of binding groups, i.e. the ``(name1, name2, ..., expression)`` specifications accepted by the binders.
"""

from typing import Any, Callable, Iterable, List, NamedTuple, Sequence, Tuple

from collections.abc import Iterable as AbstractIterable

from atmfjstc.lib.multi_values.errors import BindingShapeError
from atmfjstc.lib.multi_values.environment import Environment


Expression = Callable[[Any], Any]


class BindingGroup(NamedTuple):
    """
    A single destructuring unit: one or more variable names, and the expression whose values will populate them.

    The expression receives the environment it is evaluated in as its only argument.
    """
    names: Tuple[str, ...]
    expression: Expression


def split_tail(items: Sequence[Any], min_head: int = 1) -> Tuple[Tuple[Any, ...], Tuple[Any, ...]]:
    """
    Splits a sequence into a head containing all items but the last, and a tail containing just the last item.

    Throws a `BindingShapeError` if there are not enough items for the head to have at least `min_head` items and the
    tail to have one.
    """
    items = tuple(items)

    if len(items) < min_head + 1:
        raise BindingShapeError(
            f"Expected at least {min_head + 1} items (at least {min_head} name(s) and an expression), "
            f"got {len(items)}",
            items
        )

    return items[:-1], items[-1:]


def parse_binding_group(raw: Any) -> BindingGroup:
    if isinstance(raw, BindingGroup):
        if len(raw.names) == 0:
            raise BindingShapeError("A binding group must name at least one variable", raw)

        _check_group_contents(raw.names, raw.expression, raw)

        return raw
    if isinstance(raw, (str, bytes)) or not isinstance(raw, AbstractIterable):
        raise BindingShapeError(f"A binding group must be a sequence of names and an expression, got {raw!r}", raw)

    names, (expression,) = split_tail(raw)

    _check_group_contents(names, expression, raw)

    return BindingGroup(names=names, expression=expression)


def _check_group_contents(names, expression, raw):
    for name in names:
        if not isinstance(name, str) or not name.isidentifier():
            raise BindingShapeError(f"Invalid variable name {name!r} in binding group", raw)
        if hasattr(Environment, name):
            # Would be shadowed by an attribute of the environment object when accessed as ``env.<name>``
            raise BindingShapeError(f"Variable name {name!r} is reserved", raw)

    if not callable(expression):
        raise BindingShapeError(
            f"The last item in a binding group must be a callable expression, got {expression!r}. Note that "
            f"uninitialized bindings are not supported.",
            raw
        )


def parse_binding_groups(raw_groups: Iterable[Any]) -> List[BindingGroup]:
    """
    Parses a list of binding groups, in order. All groups are checked before the result is returned, so that errors can
    be detected before any expression is evaluated.
    """
    result = []

    for index, raw in enumerate(raw_groups):
        try:
            result.append(parse_binding_group(raw))
        except BindingShapeError as e:
            raise BindingShapeError(f"Malformed binding group #{index}: {e}", e.group, index) from e

    return result
