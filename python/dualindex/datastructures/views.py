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

"""Module containing read-only views over the dual index's internal maps."""

import collections.abc
from typing import (TYPE_CHECKING, Generic, Hashable, Iterator, Mapping,
                    Optional, TypeVar, final, overload)

from typing_extensions import override

if TYPE_CHECKING:
    from dualindex.datastructures.dualindex import ChildRecord

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"
__version__ = "1.0.0"

__all__ = (
    "ListView",
    "ListValuedMappingView",
    "ChildRecordView",
    "ChildRecordMappingView"
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


LT = TypeVar("LT")


@final
class ListView(collections.abc.Sequence, Generic[LT]):
    """
    Class defining a view of a list.

    The list cannot be modified through the view, but the view will reflect
    changes made to the list by its owner.

    A list view compares equal to any other sequence (except strings and
    bytes) holding equal items in the same order.
    """

    __slots__ = {
        "__list": "The list being viewed."
    }

    def __init__(self, list_: list[LT], /) -> None:
        """Create a new list view."""
        self.__list: list[LT] = list_

    def __repr__(self) -> str:
        """Get an instantiable string representation of the list view."""
        return f"ListView({self.__list!r})"

    def __eq__(self, other: object) -> bool:
        """Check if the viewed list holds the same items as a sequence."""
        if isinstance(other, ListView):
            return self.__list == other.__list
        if (isinstance(other, collections.abc.Sequence)
                and not isinstance(other, (str, bytes))):
            return self.__list == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore

    @overload
    def __getitem__(self, index: int, /) -> LT:
        """Get the item at the given index."""
        ...

    @overload
    def __getitem__(self, index: slice, /) -> list[LT]:
        """Get the slice at the given index."""
        ...

    @override
    def __getitem__(self, index: int | slice, /) -> LT | list[LT]:
        """Get the item or slice at the given index."""
        return self.__list[index]

    @override
    def __iter__(self) -> Iterator[LT]:
        """Iterate over the items in the list."""
        return iter(self.__list)

    @override
    def __len__(self) -> int:
        """Get the number of items in the list."""
        return len(self.__list)


KT = TypeVar("KT", bound=Hashable)
VT_co = TypeVar("VT_co", covariant=True)


@final
class ListValuedMappingView(collections.abc.Mapping, Generic[KT, VT_co]):
    """
    Class defining a list-valued mapping view type.

    The mapping cannot be modified through the view, but the view will reflect
    changes made to the mapping by its owner.
    """

    __slots__ = {
        "__list_valued_mapping": "The list-valued mapping being viewed."
    }

    def __init__(self, mapping: Mapping[KT, list[VT_co]], /) -> None:
        """Create a new list-valued mapping view."""
        self.__list_valued_mapping: Mapping[KT, list[VT_co]] = mapping

    def __repr__(self) -> str:
        """
        Get an instantiable string representation of the list-valued mapping
        view.
        """
        return f"ListValuedMappingView({self.__list_valued_mapping!r})"

    @override
    def __contains__(self, key: object, /) -> bool:
        """Check if a key is in the list-valued mapping view."""
        return key in self.__list_valued_mapping

    @override
    def __getitem__(self, key: KT, /) -> ListView[VT_co]:
        """Get the list of items in the list-valued mapping view."""
        return ListView(self.__list_valued_mapping[key])

    @override
    def __iter__(self) -> Iterator[KT]:
        """Iterate over the items in the list-valued mapping view."""
        return iter(self.__list_valued_mapping)

    @override
    def __len__(self) -> int:
        """Get the number of items in the list-valued mapping view."""
        return len(self.__list_valued_mapping)


@final
class ChildRecordView(Generic[KT, VT_co]):
    """
    Class defining a read-only view of a child record.

    Exposes the child's value and a list view of its parent keys.
    """

    __slots__ = {
        "__record": "The child record being viewed."
    }

    def __init__(self, record: "ChildRecord[KT, VT_co]", /) -> None:
        """Create a new child record view."""
        self.__record: "ChildRecord[KT, VT_co]" = record

    def __repr__(self) -> str:
        """Get a string representation of the child record view."""
        return (f"ChildRecordView(value={self.__record.value!r}, "
                f"parents={self.__record.parents!r})")

    @property
    def value(self) -> Optional[VT_co]:
        """Get the value of the child, None if no value is set."""
        return self.__record.value

    @property
    def parents(self) -> ListView[KT]:
        """Get a list view of the parent keys of the child."""
        return ListView(self.__record.parents)


@final
class ChildRecordMappingView(collections.abc.Mapping, Generic[KT, VT_co]):
    """
    Class defining a view of a mapping from child keys to child records.

    Records are exposed as child record views, so neither the mapping nor
    the records can be modified through the view.
    """

    __slots__ = {
        "__record_mapping": "The child record mapping being viewed."
    }

    def __init__(
        self,
        mapping: Mapping[KT, "ChildRecord[KT, VT_co]"], /
    ) -> None:
        """Create a new child record mapping view."""
        self.__record_mapping: Mapping[KT, "ChildRecord[KT, VT_co]"] = mapping

    def __repr__(self) -> str:
        """
        Get an instantiable string representation of the child record mapping
        view.
        """
        return f"ChildRecordMappingView({self.__record_mapping!r})"

    @override
    def __contains__(self, key: object, /) -> bool:
        """Check if a child key is in the child record mapping view."""
        return key in self.__record_mapping

    @override
    def __getitem__(self, key: KT, /) -> ChildRecordView[KT, VT_co]:
        """Get a view of the record of the given child key."""
        return ChildRecordView(self.__record_mapping[key])

    @override
    def __iter__(self) -> Iterator[KT]:
        """Iterate over the child keys in the child record mapping view."""
        return iter(self.__record_mapping)

    @override
    def __len__(self) -> int:
        """Get the number of child keys in the child record mapping view."""
        return len(self.__record_mapping)
