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

"""Version string tokenizer.

Turns a raw version string into a normalized tree of items in a single
left-to-right pass over the lowercased input.

Separators:
- "." ends the current component
- "-" ends the current component and opens a nested list
- a switch between digits and letters ("1alpha", "rc1") ends the current
  component and opens a nested list, exactly like "-"

So "1.0alpha1" and "1.0-alpha-1" tokenize to the same tree.

Example:
    >>> from mavenver.canonical import render_tokens
    >>> render_tokens(tokenize("1.0-alpha-1"))
    '[1, [alpha, [1]]]'
"""

from __future__ import annotations

from .canonical import render_tokens
from .exceptions import NumericOverflowError
from .items import ZERO, IntItem, Item, ListItem, LongItem, StringItem
from .logging import get_global_logger
from .normalize import normalize
from .qualifiers import make_qualifier

# Up to 9 digits always fit in a signed 32-bit int
MAX_INTITEM_LENGTH = 9
# Up to 18 digits always fit in a signed 64-bit int
MAX_LONGITEM_LENGTH = 18

_DIGITS = frozenset("0123456789")


def _strip_leading_zeros(token: str) -> str:
    # A run made only of zeros keeps its full length: ten zeros are a
    # LongItem(0) and nineteen overflow
    return token.lstrip("0") or token


def parse_number(token: str, version: str) -> IntItem | LongItem:
    """Classify a digit run by its significant length.

    Args:
        token: Digit-only token.
        version: Full version string, used in the error message.

    Returns:
        IntItem for up to 9 significant digits, LongItem for up to 18.

    Raises:
        NumericOverflowError: If the run has more than 18 significant digits.
    """
    digits = _strip_leading_zeros(token)
    if len(digits) <= MAX_INTITEM_LENGTH:
        return IntItem(int(digits))
    if len(digits) <= MAX_LONGITEM_LENGTH:
        return LongItem(int(digits))
    raise NumericOverflowError(token, version)


def _parse_item(is_digit: bool, token: str, version: str) -> Item:
    if is_digit:
        return parse_number(token, version)
    return StringItem(make_qualifier(token, followed_by_digit=False))


def tokenize(version: str) -> ListItem:
    """Parse a version string into a normalized item tree.

    Args:
        version: Raw version string; case is ignored.

    Returns:
        The root list of the parsed tree.

    Raises:
        NumericOverflowError: If a digit run exceeds 18 significant digits.
    """
    text = version.lower()

    root = ListItem()
    current = root
    stack = [root]

    def open_list() -> None:
        nonlocal current
        nested = ListItem()
        current.add(nested)
        current = nested
        stack.append(nested)

    is_digit = False
    start = 0

    for i, c in enumerate(text):
        if c == "." or c == "-":
            if i == start:
                current.add(ZERO)
            else:
                current.add(_parse_item(is_digit, text[start:i], version))
            start = i + 1
            if c == "-":
                open_list()
        elif c in _DIGITS:
            if not is_digit and i > start:
                qualifier = make_qualifier(text[start:i], followed_by_digit=True)
                current.add(StringItem(qualifier))
                start = i
                open_list()
            is_digit = True
        else:
            if is_digit and i > start:
                current.add(parse_number(text[start:i], version))
                start = i
                open_list()
            is_digit = False

    if len(text) > start:
        current.add(_parse_item(is_digit, text[start:], version))

    while stack:
        normalize(stack.pop())

    get_global_logger().debug("PARSE", f"{version!r} -> {render_tokens(root)}")
    return root
