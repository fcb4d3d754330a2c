"""
Utilities for working with functions that return more than one value.

Python functions return multiple values by returning a tuple, and the language itself only offers tuple unpacking for
consuming them. This package adds two higher-level idioms:

- `map_values`: applies a multiple-value function elementwise over several sequences, collecting each of its values
  into a separate list (like an "unzipping" `map`)
- `bind_sequential` / `bind_parallel`: destructure the values of several expressions into named variables, with either
  sequential or parallel visibility between the bindings, then evaluate a body in the resulting environment

Wherever fewer values are available than were requested, the `ABSENT` token is used by default, so that a missing value
can be told apart from a returned ``None``.
"""

from atmfjstc.lib.multi_values.errors import MultiValuesError, ArityError, BindingShapeError
from atmfjstc.lib.multi_values.values import ABSENT, Values, values, value_list, nth_value, pad_values
from atmfjstc.lib.multi_values.mapping import map_values, iter_map_values
from atmfjstc.lib.multi_values.environment import Environment
from atmfjstc.lib.multi_values.binding import bind_sequential, bind_parallel, let_values, let_values_seq


__version__ = '1.0.0'
