# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the Datever Project


from typing import Callable, Iterable, Optional, TypeVar

T = TypeVar("T")


# calendar components, most significant first
component_names = ("year", "month", "day", "hour", "minute", "second")

# expression node field for each component
component_fields = ("Y", "M", "D", "h", "m", "s")


class _Common(object):
    __slots__ = ()

    def __str__(self) -> str:
        raise NotImplementedError

    def __ne__(self, other: object) -> bool:
        return not (self == other)

    def __repr__(self) -> str:
        return "%s(%r)" % (self.__class__.__name__, str(self))


def cmp(a, b) -> int:
    """Three-way compare, returning -1, 0 or 1."""
    return int(a > b) - int(b > a)


def last_satisfying(values: Iterable[T],
                    satisfies: Callable[[T], bool],
                    select: Callable[[T, T], T]) -> Optional[T]:
    """Reduce the values that pass `satisfies` with `select`.

    `values` is iterated exactly once, so it may be a one-shot iterator.

    Returns:
        The reduced value, or None if no value satisfies.
    """
    result = None

    for value in values:
        if satisfies(value):
            result = value if result is None else select(result, value)

    return result
