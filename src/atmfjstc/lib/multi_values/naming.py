"""
Generation of fresh, unique names for temporary bindings.
"""

import itertools
import threading

from typing import Optional


_counter = itertools.count(1)
_counter_lock = threading.Lock()


def fresh_name(hint: Optional[str] = None) -> str:
    """
    Generates a name that is guaranteed to be different from any other name generated during the lifetime of the
    process, including by other threads.

    The name starts with ``#``, so it can never be a valid Python identifier. Hence it will never collide with the name
    of any user variable either.

    Args:
        hint: Optional text to include in the name so as to make it recognizable when debugging (e.g. the name of the
            variable that the temporary stands in for). It has no bearing on uniqueness.
    """
    with _counter_lock:
        index = next(_counter)

    return f"#{hint or ''}:{index}"
