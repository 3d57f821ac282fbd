# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Item model for parsed versions.

A parsed version is a tree of items. The set of item kinds is closed:

- IntItem: numeric component with at most 9 significant digits
- LongItem: numeric component with 10 to 18 significant digits
- StringItem: textual qualifier (already expanded and aliased)
- ListItem: ordered sub-list, used for the root and for every group opened
  by a hyphen or by a digit/letter transition

Functions that dispatch on item kind use isinstance chains that end in
`TypeError` for anything outside this set.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union

from .qualifiers import RELEASE_RANK, qualifier_rank


@dataclass(frozen=True)
class IntItem:
    """Numeric component that fits in 32 bits (at most 9 digits)."""

    value: int = 0

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class LongItem:
    """Numeric component that fits in 64 bits (10 to 18 digits)."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class StringItem:
    """Qualifier component, e.g. "alpha", "rc", or "" for a release."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(eq=False, repr=False)
class ListItem:
    """Ordered list of items.

    Lists are only appended to and trimmed while a version is being
    parsed. After that the tree is treated as read-only, which is what
    makes hashing it safe. Equality and hashing walk the tree with
    `flatten`, so arbitrarily deep lists never hit the recursion limit.
    """

    items: list[Item] = field(default_factory=list)

    def add(self, item: Item) -> None:
        self.items.append(item)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ListItem):
            return NotImplemented
        return tuple(flatten(self)) == tuple(flatten(other))

    def __hash__(self) -> int:
        return hash(tuple(flatten(self)))

    def __repr__(self) -> str:
        from .canonical import render_tokens

        return f"ListItem({render_tokens(self)})"


Item = Union[IntItem, LongItem, StringItem, ListItem]

ZERO = IntItem(0)

# Markers emitted by flatten() around the members of a list
OPEN = "["
CLOSE = "]"


def flatten(item: Item) -> Iterator[Item | str]:
    """Walk an item tree depth-first without recursion.

    Yields every leaf item in order, with OPEN before and CLOSE after the
    members of each list. `[1, [alpha]]` yields
    `OPEN, IntItem(1), OPEN, StringItem("alpha"), CLOSE, CLOSE`.

    Raises:
        TypeError: If the tree contains a value that is not an item.
    """
    stack = [iter((item,))]
    while stack:
        for child in stack[-1]:
            if isinstance(child, ListItem):
                yield OPEN
                stack.append(iter(child.items))
                break
            if not isinstance(child, (IntItem, LongItem, StringItem)):
                raise TypeError(f"not a version item: {child!r}")
            yield child
        else:
            stack.pop()
            if stack:
                yield CLOSE


def is_null(item: Item) -> bool:
    """Return True if the item carries no ordering information.

    Numbers are null when zero, qualifiers when they rank as a plain
    release (the empty qualifier), and lists when they are empty.
    """
    if isinstance(item, (IntItem, LongItem)):
        return item.value == 0
    if isinstance(item, StringItem):
        return qualifier_rank(item.value) == RELEASE_RANK
    if isinstance(item, ListItem):
        return len(item) == 0
    raise TypeError(f"not a version item: {item!r}")
