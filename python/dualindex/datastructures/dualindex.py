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

"""
Module containing the dual index, a two-map parent-child association
structure.
"""

import collections.abc
import dataclasses
import logging
import types
from typing import (Generic, Hashable, Iterable, Iterator, Optional, TypeVar,
                    final)

from typing_extensions import override

from dualindex.auxiliary.moreitertools import (as_keys, filter_not_equal,
                                               unique_everseen)
from dualindex.datastructures._index_errors import KeyNotFound
from dualindex.datastructures.views import (ChildRecordMappingView,
                                            ChildRecordView,
                                            ListValuedMappingView, ListView)

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"
__version__ = "1.0.0"

__all__ = (
    "ChildRecord",
    "DualIndex",
    "KeyNotFound"
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


# Dual index generic key type (must be hashable) and child value type.
KT = TypeVar("KT", bound=Hashable)
VT = TypeVar("VT")


@dataclasses.dataclass
class ChildRecord(Generic[KT, VT]):
    """
    The record of a child key in a dual index.

    Items
    -----
    `value: VT | None = None` - The value of the child, None if no value has
    been set.

    `parents: list[KT]` - The parent keys of the child, in the order they were
    linked. The same parent appears once per link.
    """

    value: Optional[VT] = None
    parents: list[KT] = dataclasses.field(default_factory=list)

    def copy(self) -> "ChildRecord[KT, VT]":
        """Get a copy of the record which does not share its parent list."""
        return ChildRecord(self.value, list(self.parents))


@final
class DualIndex(collections.abc.Collection, Generic[KT, VT]):
    """
    Class defining a dual index of parent-child associations.

    A dual index keeps two maps; a parent-map from parent keys to the ordered
    list of their child keys, and a child-map from child keys to a record
    holding the child's optional value and the ordered list of its parent
    keys. Looking up the children of a parent and the parents of a child are
    therefore equally fast.

    The same key can be both a parent and a child. Entries are only removed
    by explicit deletion, a parent with no children or a child with no parents
    stays registered until it is deleted.

    Example Usage
    -------------
    ```
    >>> index = DualIndex[str, int]()
    >>> index.add_child_under("page_2", ["page_1", "index"])
    >>> index.children_of("page_1")
    ListView(['page_2'])
    >>> index.parents_of("page_2")
    ListView(['page_1', 'index'])

    ## Children carry an optional value.
    >>> index.set_value("page_2", 200)
    >>> index.values_of_children("index")
    {'page_2': 200}

    ## Deleting a key removes every reference to it.
    >>> index.delete_parent("page_1")
    >>> index.parents_of("page_2")
    ListView(['index'])
    >>> "page_1" in index
    False
    ```
    """

    __DUALINDEX_LOGGER = logging.getLogger("DualIndex")

    __slots__ = {
        "__parents": "The parent-map, from parent keys to child key lists.",
        "__children": "The child-map, from child keys to child records.",
        "__allow_duplicates": "Whether repeated links are kept.",
        "__debug": "Whether to log debug messages."
    }

    def __init__(
        self, *,
        allow_duplicates: bool = True,
        debug: bool = False
    ) -> None:
        """
        Create a new empty dual index.

        Parameters
        ----------
        `allow_duplicates: bool = True` - Whether linking a child under a
        parent it is already linked under adds the link again. If True, both
        the child's parent list and the parent's child list grow by one entry
        per link. If False, links that already exist are skipped.

        `debug: bool = False` - Whether to log debug messages on mutations.
        """
        if not isinstance(allow_duplicates, bool):
            raise TypeError("allow_duplicates must be a bool. "
                            f"Got; {type(allow_duplicates).__name__}.")
        if not isinstance(debug, bool):
            raise TypeError("debug must be a bool. "
                            f"Got; {type(debug).__name__}.")
        self.__parents: dict[KT, list[KT]] = {}
        self.__children: dict[KT, ChildRecord[KT, VT]] = {}
        self.__allow_duplicates: bool = allow_duplicates
        self.__debug: bool = debug
        if self.__debug:
            self.__DUALINDEX_LOGGER.debug(
                "Creating new dual index with: allow_duplicates=%s, debug=%s",
                allow_duplicates, debug
            )

    def __repr__(self) -> str:
        """Get a string representation of the dual index."""
        children = {child: (record.value, record.parents)
                    for child, record in self.__children.items()}
        return (f"{self.__class__.__name__}(parents={self.__parents!r}, "
                f"children={children!r})")

    def __copy__(self) -> "DualIndex[KT, VT]":
        """Get an independent copy of the dual index."""
        index = self.__class__(allow_duplicates=self.__allow_duplicates,
                               debug=self.__debug)
        index.__parents = self.snapshot_parents()
        index.__children = self.snapshot_children()
        return index

    def copy(self) -> "DualIndex[KT, VT]":
        """Get an independent copy of the dual index."""
        return self.__copy__()

    @override
    def __contains__(self, key: object, /) -> bool:
        """Check if the key is a parent key, a child key, or both."""
        return key in self.__parents or key in self.__children

    @override
    def __iter__(self) -> Iterator[KT]:
        """
        Iterate over all distinct keys, parent keys first, followed by keys
        that are only child keys.
        """
        yield from self.__parents
        yield from (child for child in self.__children
                    if child not in self.__parents)

    @override
    def __len__(self) -> int:
        """Get the number of distinct keys in both maps."""
        return len(self.__parents.keys() | self.__children.keys())

    @property
    def allow_duplicates(self) -> bool:
        """Get whether repeated links are kept."""
        return self.__allow_duplicates

    @property
    def debug(self) -> bool:
        """Get whether debug messages are logged."""
        return self.__debug

    @property
    def parents_view(self) -> types.MappingProxyType[KT, ListView[KT]]:
        """
        Get a live read-only view of the parent-map, from parent keys to
        list views of their child keys.
        """
        return types.MappingProxyType(ListValuedMappingView(self.__parents))

    @property
    def children_view(
        self
    ) -> types.MappingProxyType[KT, ChildRecordView[KT, VT]]:
        """
        Get a live read-only view of the child-map, from child keys to
        views of their records.
        """
        return types.MappingProxyType(ChildRecordMappingView(self.__children))

    def add_child_under(
        self,
        child: KT,
        parents: KT | Iterable[KT], /
    ) -> None:
        """
        Link a child under one or more parents.

        The child and any parents that are not yet registered are registered.
        Each parent is appended to the child's parent list, and the child is
        appended to each parent's child list. If the index allows duplicates,
        links that already exist are added again, otherwise they are skipped.

        For example:
        ```
        >>> index = DualIndex()
        >>> index.add_child_under("child", ["parent_1", "parent_2"])
        >>> index.add_child_under("child", "parent_1")
        >>> index.parents_of("child")
        ListView(['parent_1', 'parent_2', 'parent_1'])
        >>> index.children_of("parent_1")
        ListView(['child', 'child'])
        ```
        """
        parents_ = as_keys(parents)
        self.__check_hashable(child, *parents_)
        if self.__debug:
            self.__DUALINDEX_LOGGER.debug(
                "Adding child %r under parents %r.", child, parents_
            )
        if child not in self.__children:
            self.__children[child] = ChildRecord()
        record = self.__children[child]
        for parent in parents_:
            if not self.__allow_duplicates and parent in record.parents:
                continue
            record.parents.append(parent)
            if parent not in self.__parents:
                self.__parents[parent] = []
            self.__parents[parent].append(child)

    def register_parent(self, parents: KT | Iterable[KT], /) -> None:
        """Register one or more parent keys that are not already registered."""
        parents_ = as_keys(parents)
        self.__check_hashable(*parents_)
        if self.__debug:
            self.__DUALINDEX_LOGGER.debug(
                "Registering parents %r.", parents_
            )
        for parent in parents_:
            if parent not in self.__parents:
                self.__parents[parent] = []

    def register_child(self, children: KT | Iterable[KT], /) -> None:
        """
        Register one or more child keys that are not already registered,
        with no value and no parents.
        """
        children_ = as_keys(children)
        self.__check_hashable(*children_)
        if self.__debug:
            self.__DUALINDEX_LOGGER.debug(
                "Registering children %r.", children_
            )
        for child in children_:
            if child not in self.__children:
                self.__children[child] = ChildRecord()

    @staticmethod
    def __check_hashable(*keys: object) -> None:
        """
        Raise a TypeError if any of the keys is not hashable, so that a
        failing mutation fails before anything is changed.
        """
        for key in keys:
            try:
                hash(key)
            except TypeError as error:
                raise TypeError(f"Key {key!r} is not hashable.") from error

    def __get_record(self, child: KT, /) -> ChildRecord[KT, VT]:
        """Get the record of a child, raising KeyNotFound if unregistered."""
        record = self.__children.get(child)
        if record is None:
            raise KeyNotFound(child, "child")
        return record

    def __get_children(self, parent: KT, /) -> list[KT]:
        """Get the child list of a parent, raising KeyNotFound if unregistered."""
        children = self.__parents.get(parent)
        if children is None:
            raise KeyNotFound(parent, "parent")
        return children

    def set_value(self, child: KT, value: Optional[VT], /) -> None:
        """
        Set the value of a registered child.

        Raises KeyNotFound if the child is not registered.
        """
        record = self.__get_record(child)
        if self.__debug:
            self.__DUALINDEX_LOGGER.debug(
                "Setting value of child %r to %r.", child, value
            )
        record.value = value

    def get_value(self, child: KT, /) -> Optional[VT]:
        """
        Get the value of a registered child, None if no value is set.

        Raises KeyNotFound if the child is not registered.
        """
        return self.__get_record(child).value

    def parents_of(self, child: KT, /) -> ListView[KT]:
        """
        Get a live view of the parent keys of a registered child, in the
        order they were linked.

        Raises KeyNotFound if the child is not registered.
        """
        return ListView(self.__get_record(child).parents)

    def children_of(self, parent: KT, /) -> ListView[KT]:
        """
        Get a live view of the child keys of a registered parent, in the
        order they were linked.

        Raises KeyNotFound if the parent is not registered.
        """
        return ListView(self.__get_children(parent))

    def values_of_children(self, parent: KT, /) -> dict[KT, Optional[VT]]:
        """
        Get a dictionary mapping each distinct child of a registered parent
        to the child's value.

        Raises KeyNotFound if the parent is not registered.
        """
        return {child: self.__children[child].value
                for child in unique_everseen(self.__get_children(parent))}

    def snapshot_parents(self) -> dict[KT, list[KT]]:
        """
        Get a copy of the parent-map. Changes to the copy do not affect the
        dual index.
        """
        return {parent: list(children)
                for parent, children in self.__parents.items()}

    def snapshot_children(self) -> dict[KT, ChildRecord[KT, VT]]:
        """
        Get a copy of the child-map. Changes to the copy do not affect the
        dual index.
        """
        return {child: record.copy()
                for child, record in self.__children.items()}

    def exists(self, key: KT, /) -> bool:
        """Check if the key is a parent key, a child key, or both."""
        return key in self

    def is_child(self, key: KT, /) -> bool:
        """Check if the key is a child key."""
        return key in self.__children

    def is_parent(self, key: KT, /) -> bool:
        """Check if the key is a parent key."""
        return key in self.__parents

    def delete_child(self, child: KT, /) -> None:
        """
        Delete a child key, removing every occurrence of it from the child
        lists of its parents.

        Does nothing if the child is not registered.
        """
        record = self.__children.get(child)
        if record is None:
            return
        if self.__debug:
            self.__DUALINDEX_LOGGER.debug(
                "Deleting child %r from parents %r.", child, record.parents
            )
        for parent in unique_everseen(record.parents):
            # Filter in place so that views of the list stay live.
            children = self.__parents[parent]
            children[:] = filter_not_equal(children, child)
        del self.__children[child]

    def delete_parent(self, parent: KT, /) -> None:
        """
        Delete a parent key, removing every occurrence of it from the parent
        lists of its children.

        Does nothing if the parent is not registered.
        """
        children = self.__parents.get(parent)
        if children is None:
            return
        if self.__debug:
            self.__DUALINDEX_LOGGER.debug(
                "Deleting parent %r from children %r.", parent, children
            )
        for child in unique_everseen(children):
            parents = self.__children[child].parents
            parents[:] = filter_not_equal(parents, parent)
        del self.__parents[parent]

    def delete(self, key: KT, /) -> None:
        """
        Delete a key from both maps, removing every reference to it.

        Does nothing if the key is not registered.
        """
        self.delete_child(key)
        self.delete_parent(key)

    def orphans(self) -> dict[KT, ChildRecord[KT, VT]]:
        """Get copies of the records of all children that have no parents."""
        return {child: record.copy()
                for child, record in self.__children.items()
                if not record.parents}

    def childless(self) -> dict[KT, list[KT]]:
        """Get all parents that have no children, each with an empty list."""
        return {parent: [] for parent, children in self.__parents.items()
                if not children}


def __main() -> None:
    """Execute the main routine."""
    index = DualIndex[str, int]()
    index.add_child_under("page_2", ["page_1", "index"])
    index.add_child_under("page_3", "page_2")
    index.register_parent("root")
    index.register_child("page_4")
    index.set_value("page_2", 200)
    print(index)
    print(index.children_of("page_1"))
    print(index.parents_of("page_2"))
    print(index.values_of_children("index"))
    print(index.orphans())
    print(index.childless())
    index.delete("page_2")
    print(index)
    print(list(index))


if __name__ == "__main__":
    __main()
