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

"""Module for all dual index related errors."""

from typing import Hashable, Literal, TypeAlias

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"
__version__ = "1.0.0"

__all__ = (
    "KeyNotFound",
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


IndexSide: TypeAlias = Literal["parent", "child"]


class KeyNotFound(KeyError):
    """
    Raised when a key is looked up on a side of a dual index where it has
    not been registered.

    Derives from `KeyError`, so it can be handled like any other missing
    mapping key.
    """

    def __init__(self, key: Hashable, side: IndexSide) -> None:
        """Create a new key not found error for the given key and side."""
        super().__init__(key, side)
        self.key: Hashable = key
        self.side: IndexSide = side

    def __str__(self) -> str:
        return f"Key {self.key!r} is not a registered {self.side} key."
