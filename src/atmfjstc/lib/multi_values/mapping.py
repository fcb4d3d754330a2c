"""
Utilities for mapping functions that return multiple values over sequences.
"""

from typing import Any, Callable, Iterable, Iterator, List, Tuple

from collections.abc import Sequence

from atmfjstc.lib.multi_values.values import ABSENT, pad_values, check_count


def map_values(n: int, func: Callable, *sequences: Iterable, missing: Any = ABSENT) -> Tuple[List[Any], ...]:
    """
    Applies a multiple-value function elementwise over several sequences, collecting each of its first `n` values into
    a separate list.

    Example::

        quotients, remainders = map_values(2, divmod, [12, 23, 34], [10, 10, 10])
        # quotients == [1, 2, 3], remainders == [2, 3, 4]

    The sequences are traversed in lockstep, as with the builtin `map`, so the number of calls equals the length of the
    shortest sequence. If no sequences are supplied, `func` is never called.

    If a call produces fewer than `n` values, the lists for the remaining positions receive `missing` (by default, the
    `ABSENT` token). Extra values are ignored. All `n` lists thus always have the same length.

    Args:
        n: The number of output lists to produce. Must be a non-negative integer, otherwise an `ArityError` is thrown.
        func: The function to apply. It is called with one item from each sequence, as positional arguments.
        sequences: The input sequences (lists, tuples, generators etc.)
        missing: The value to use for positions where `func` did not produce a value

    Returns:
        A tuple of `n` lists.
    """
    outputs = tuple([] for _ in range(check_count(n, 'Output count')))

    for row in _iter_rows(n, func, sequences, missing):
        for output, value in zip(outputs, row):
            output.append(value)

    return outputs


def iter_map_values(n: int, func: Callable, *sequences: Iterable, missing: Any = ABSENT) -> Iterator[Tuple[Any, ...]]:
    """
    Lazy counterpart of `map_values`. Instead of `n` lists, produces one `n`-tuple per call to `func`.

    The output count is checked immediately, not when iteration starts.
    """
    return _iter_rows(check_count(n, 'Output count'), func, sequences, missing)


def _iter_rows(n, func, sequences, missing):
    for args in _iter_lockstep(sequences):
        yield pad_values(func(*args), n, missing)


def _iter_lockstep(sequences):
    if len(sequences) == 0:
        return

    if all(isinstance(seq, Sequence) for seq in sequences):
        # Optimized version for vector-likes: no item is read beyond the shortest length
        length = min(len(seq) for seq in sequences)

        for index in range(length):
            yield tuple(seq[index] for seq in sequences)

        return

    yield from zip(*sequences)
