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

"""Recursive comparison of parsed version items.

`compare_items(left, right)` returns -1, 0 or 1. `right` may be None,
standing for a component that is absent because the other version is
shorter; an absent component behaves like padding with zeros.

Cross-kind rules (left vs right):

    int    < long                     fixed, the tokenizer sizes them
    int    > qualifier, list          1.1 > 1-sp, 1.1 > 1-1
    long   > int, qualifier, list
    qualifier < int, long, list       1-sp < 1-1
    list   < int, long                1-1 < 1.1
    list   > qualifier                1-1 > 1-sp

Against an absent component, numbers are equal only when zero,
qualifiers compare their rank with the release rank ("1-rc" < "1",
"1-sp" > "1"), and lists compare each member against absent in turn.
"""

from __future__ import annotations

from itertools import zip_longest

from .items import IntItem, Item, ListItem, LongItem, StringItem
from .qualifiers import RELEASE_RANK, qualifier_rank


def _cmp(a: int | str, b: int | str) -> int:
    return (a > b) - (a < b)


def _compare_int(left: IntItem, right: Item | None) -> int:
    if right is None:
        return 0 if left.value == 0 else 1
    if isinstance(right, IntItem):
        return _cmp(left.value, right.value)
    if isinstance(right, LongItem):
        return -1
    if isinstance(right, (StringItem, ListItem)):
        return 1
    raise TypeError(f"not a version item: {right!r}")


def _compare_long(left: LongItem, right: Item | None) -> int:
    if right is None:
        return 0 if left.value == 0 else 1
    if isinstance(right, LongItem):
        return _cmp(left.value, right.value)
    if isinstance(right, (IntItem, StringItem, ListItem)):
        return 1
    raise TypeError(f"not a version item: {right!r}")


def _compare_string(left: StringItem, right: Item | None) -> int:
    if right is None:
        return _cmp(qualifier_rank(left.value), RELEASE_RANK)
    if isinstance(right, StringItem):
        return _cmp(qualifier_rank(left.value), qualifier_rank(right.value))
    if isinstance(right, (IntItem, LongItem, ListItem)):
        return -1
    raise TypeError(f"not a version item: {right!r}")


def _compare_list_to_leaf(left: ListItem, right: Item) -> int:
    if isinstance(right, (IntItem, LongItem)):
        return -1
    if isinstance(right, StringItem):
        return 1
    raise TypeError(f"not a version item: {right!r}")


def _compare_leaf(left: Item, right: Item | None) -> int:
    if isinstance(left, IntItem):
        return _compare_int(left, right)
    if isinstance(left, LongItem):
        return _compare_long(left, right)
    if isinstance(left, StringItem):
        return _compare_string(left, right)
    if isinstance(left, ListItem):
        return _compare_list_to_leaf(left, right)
    raise TypeError(f"not a version item: {left!r}")


def compare_items(left: Item, right: Item | None) -> int:
    """Compare two items, or an item against an absent component.

    Lists are walked with an explicit stack of pending (left, right, sign)
    pairs, so nesting depth is not limited by the recursion limit. Pairs
    are taken in order and the first non-zero result decides.

    Args:
        left: Item on the left-hand side.
        right: Item on the right-hand side, or None when absent.

    Returns:
        -1 if left < right, 0 if equal, 1 if left > right.
    """
    pending: list[tuple[Item, Item | None, int]] = [(left, right, 1)]
    while pending:
        l_item, r_item, sign = pending.pop()
        if isinstance(l_item, ListItem) and r_item is None:
            # 1-0 == 1- == 1 after normalization; check every member, not
            # just the first, so [0, 1] is still greater than absent
            pending.extend((item, None, sign) for item in reversed(l_item.items))
            continue
        if isinstance(l_item, ListItem) and isinstance(r_item, ListItem):
            pairs = []
            for a, b in zip_longest(l_item, r_item):
                if a is None:
                    # left side ran out: compare the other way round, negated
                    pairs.append((b, None, -sign))
                else:
                    pairs.append((a, b, sign))
            pending.extend(reversed(pairs))
            continue
        result = _compare_leaf(l_item, r_item)
        if result != 0:
            return sign * result
    return 0
