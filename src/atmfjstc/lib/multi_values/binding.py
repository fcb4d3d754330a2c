"""
Binding forms that destructure the multiple values of expressions into named variables.

Each binding group has the form ``(name1, name2, ..., expression)``, where the expression is a callable receiving the
current `Environment`. The values it produces are assigned to the names in order; extra values are discarded and
names left over receive the `missing` placeholder (by default, `ABSENT`).

Two evaluation orders are offered:

- `bind_sequential`: each expression sees the variables bound by all the groups before it
- `bind_parallel`: every expression sees only the environment that existed before the binder, so sibling groups cannot
  observe each other's variables

In both cases the expressions are evaluated left to right, and the body is called last with an environment holding all
the new variables. Example::

    bind_sequential(
        [
            ('a', 'b', lambda e: divmod(42, 10)),
            ('c', 'd', 'e', lambda e: values(1, 2, 3)),
        ],
        lambda e: e.a + e.b + e.c + e.d + e.e
    )  # => 12

The decorators `let_values` and `let_values_seq` provide the same functionality in statement form.
"""

import logging

from typing import Any, Callable, Iterable, Mapping, Optional, Union

from atmfjstc.lib.multi_values.values import ABSENT, pad_values
from atmfjstc.lib.multi_values.groups import BindingGroup, parse_binding_groups
from atmfjstc.lib.multi_values.naming import fresh_name
from atmfjstc.lib.multi_values.environment import Environment


LOG = logging.getLogger(__name__)

Body = Callable[[Environment], Any]
EnvSpec = Optional[Union[Environment, Mapping[str, Any]]]


def bind_sequential(groups: Iterable[Any], body: Body, env: EnvSpec = None, missing: Any = ABSENT) -> Any:
    """
    Binds the values of a series of expressions to variables, one group at a time, then evaluates a body.

    The expression of each group is evaluated in an environment containing the base environment `env` plus all the
    variables bound by previous groups. A group with a single name is equivalent to an ordinary variable assignment.

    All groups are validated before any expression is evaluated. A malformed group causes a `BindingShapeError`.
    Exceptions raised by the expressions or the body are passed through unchanged.

    Args:
        groups: The binding groups, each a sequence of one or more variable names followed by an expression
        body: A callable that receives the final environment. Its result is returned as-is.
        env: The base environment (an `Environment` or any mapping). Empty by default.
        missing: The value bound to names for which the expression did not produce a value

    Returns:
        The result of the body.
    """
    return _bind_sequential(parse_binding_groups(groups), body, Environment.coerce(env), missing)


def bind_parallel(groups: Iterable[Any], body: Body, env: EnvSpec = None, missing: Any = ABSENT) -> Any:
    """
    Binds the values of a series of expressions to variables, with all expressions evaluated in the original
    environment, then evaluates a body.

    No expression can observe the variables bound by any group in this binder, even ones declared before it. Thus, e.g.
    with an outer ``x = 100``, the groups ``('x', lambda e: 1), ('y', lambda e: e.x)`` bind `y` to 100.

    The expressions are still evaluated left to right. Parameters, return value and errors are the same as for
    `bind_sequential`. If the same name appears in more than one group, the last one wins.
    """
    base_env = Environment.coerce(env)
    parsed = parse_binding_groups(groups)

    renames = []
    temp_groups = []

    for group in parsed:
        temp_names = tuple(fresh_name(name) for name in group.names)

        renames.extend(zip(group.names, temp_names))
        temp_groups.append(BindingGroup(names=temp_names, expression=_in_env(group.expression, base_env)))

    if LOG.isEnabledFor(logging.DEBUG):
        LOG.debug("Parallel binding via temporaries: %s", ', '.join(f"{name}={temp}" for name, temp in renames))

    def _install_real_names(temp_env):
        return body(base_env.extend({name: temp_env[temp] for name, temp in renames}))

    return _bind_sequential(temp_groups, _install_real_names, base_env, missing)


def let_values_seq(*groups: Any, env: EnvSpec = None, missing: Any = ABSENT) -> Callable[[Body], Any]:
    """
    Decorator form of `bind_sequential`. The decorated function is used as the body and is immediately replaced by its
    result.

    Example::

        @let_values_seq(('q', 'r', lambda e: divmod(42, 10)), ('s', lambda e: e.q + e.r))
        def total(e):
            return e.s * 10

        # total == 60

    The groups are validated when the decorator is created.
    """
    parsed = parse_binding_groups(groups)

    def decorator(body):
        return bind_sequential(parsed, body, env=env, missing=missing)

    return decorator


def let_values(*groups: Any, env: EnvSpec = None, missing: Any = ABSENT) -> Callable[[Body], Any]:
    """
    Decorator form of `bind_parallel`. See `let_values_seq` for usage.
    """
    parsed = parse_binding_groups(groups)

    def decorator(body):
        return bind_parallel(parsed, body, env=env, missing=missing)

    return decorator


def _bind_sequential(groups, body, env, missing):
    for group in groups:
        result = group.expression(env)

        env = env.extend(dict(zip(group.names, pad_values(result, len(group.names), missing))))

    return body(env)


def _in_env(expression, env):
    def _evaluate(_temp_env):
        return expression(env)

    return _evaluate
