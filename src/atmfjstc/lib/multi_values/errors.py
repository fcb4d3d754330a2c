"""
Exceptions raised by the multiple-value helpers.

Note that exceptions raised by user-supplied functions and expressions are never caught or wrapped by this package. They
reach the caller exactly as they were raised.
"""

from typing import Any, Optional


class MultiValuesError(Exception):
    """Base class for all errors raised by this package itself."""


class ArityError(MultiValuesError, ValueError):
    """
    Raised when a count of output slots, or the index of a value, is not a non-negative integer.
    """


class BindingShapeError(MultiValuesError, ValueError):
    """
    Raised when a binding group is malformed, i.e. it does not consist of at least one variable name followed by exactly
    one expression.

    The `group` attribute holds the offending group as it was supplied (if known) and `index` its position in the group
    list (if the group was parsed as part of a list).
    """
    group = None
    index = None

    def __init__(self, text: str, group: Any = None, index: Optional[int] = None):
        super().__init__(text)
        self.group = group
        self.index = index
