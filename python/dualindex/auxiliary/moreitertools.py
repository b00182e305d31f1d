###############################################################################
# Copyright (C) 2023 Oliver Michael Kamperis
# Email: olliekampo@gmail.com
#
# This program is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or any later version.
#
# This program is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE. See the GNU General Public License for details.
#
# You should have received a copy of the GNU General Public License along with
# this program. If not, see <https://www.gnu.org/licenses/>.

"""Module defining additional functions for operating on iterables."""

__all__ = (
    "as_keys",
    "filter_not_equal",
    "unique_everseen"
)

import collections.abc
from typing import Hashable, Iterable, Iterator, TypeVar, overload

_VT = TypeVar("_VT")
_KT = TypeVar("_KT", bound=Hashable)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


@overload
def as_keys(key_or_keys: Iterable[_KT], /) -> tuple[_KT, ...]:
    ...


@overload
def as_keys(key_or_keys: _KT, /) -> tuple[_KT]:
    ...


def as_keys(key_or_keys, /):
    """
    Normalise a single key or a collection of keys to a tuple of keys.

    Strings and bytes are treated as single keys, as is anything that is not
    iterable. Any other iterable is treated as a collection of keys and is
    consumed in iteration order.

    For example:
    ```
    >>> as_keys("page")
    ("page",)
    >>> as_keys(["page_1", "page_2"])
    ("page_1", "page_2")
    >>> as_keys([("x", 1)])
    (("x", 1),)
    ```
    """
    if isinstance(key_or_keys, (str, bytes)):
        return (key_or_keys,)
    if isinstance(key_or_keys, collections.abc.Iterable):
        return tuple(key_or_keys)
    return (key_or_keys,)


def filter_not_equal(iterable: Iterable[_VT], item: object) -> Iterator[_VT]:
    """
    Return an iterator over the items of the iterable which are not equal to
    the given item.

    Every occurrence of the item is dropped, not just the first.
    """
    return (element for element in iterable if element != item)


def unique_everseen(iterable: Iterable[_KT]) -> Iterator[_KT]:
    """
    Yield the unique items of an iterable of hashable items, in the order
    they are first seen.
    """
    seen: set[_KT] = set()
    for element in iterable:
        if element not in seen:
            seen.add(element)
            yield element
