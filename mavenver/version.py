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

"""Public version type and comparison functions.

A `Version` is parsed once from a string and never changes afterwards.
Two versions are equal when their parsed trees are equal, not when their
input strings are: "1.0.0", "1" and "1-GA" are all the same version.

Examples:
    >>> parse("1.0-alpha-1") < parse("1.0")
    True
    >>> parse("1.0.0") == parse("1")
    True
    >>> parse("1.0alpha1").canonical
    '1-alpha-1'
    >>> compare_versions("1-sp", "1")
    1
"""

from __future__ import annotations

from .canonical import render_canonical, render_tokens
from .comparator import compare_items
from .logging import get_global_logger
from .results import ComparisonResult, ParseResult
from .tokenizer import tokenize

_SYMBOLS = {-1: "<", 0: "==", 1: ">"}


class Version:
    """A parsed, immutable, totally ordered version.

    Args:
        version: Raw version string. Case is ignored for ordering but kept
            in `original`.

    Raises:
        NumericOverflowError: If a digit run exceeds 18 significant digits.
    """

    __slots__ = ("_original", "_items", "_canonical")

    def __init__(self, version: str) -> None:
        object.__setattr__(self, "_original", version)
        object.__setattr__(self, "_items", tokenize(version))
        object.__setattr__(self, "_canonical", None)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def original(self) -> str:
        """The version string exactly as passed in."""
        return self._original

    @property
    def canonical(self) -> str:
        """Canonical form, computed on first access and cached.

        Two threads racing here both render the same tree, so whichever
        write lands last stores an identical string.
        """
        canonical = self._canonical
        if canonical is None:
            canonical = render_canonical(self._items)
            object.__setattr__(self, "_canonical", canonical)
        return canonical

    @property
    def tokens(self) -> str:
        """Bracketed dump of the parsed tree, e.g. "[1, [alpha, [1]]]"."""
        return render_tokens(self._items)

    def compare_to(self, other: Version) -> int:
        """Return -1, 0 or 1 as this version is older, equal or newer."""
        return compare_items(self._items, other._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) == 0

    def __hash__(self) -> int:
        return hash(self._items)

    def __lt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __str__(self) -> str:
        return self._original

    def __repr__(self) -> str:
        return f"Version({self._original!r})"


def parse(version: str) -> Version:
    """Parse a version string.

    Raises:
        NumericOverflowError: If a digit run exceeds 18 significant digits.
    """
    return Version(version)


def compare(a: Version, b: Version) -> int:
    """Compare two parsed versions, returning -1, 0 or 1."""
    return a.compare_to(b)


def _as_version(value: str | Version) -> Version:
    return value if isinstance(value, Version) else Version(value)


def compare_versions(a: str | Version, b: str | Version) -> int:
    """Compare two versions given as strings or Version objects.

    Returns:
        -1 if a < b, 0 if equal, 1 if a > b.

    Raises:
        NumericOverflowError: If either string cannot be parsed.
    """
    va, vb = _as_version(a), _as_version(b)
    result = va.compare_to(vb)
    get_global_logger().verbose(
        "COMPARE", f"{va.original!r} {_SYMBOLS[result]} {vb.original!r}"
    )
    return result


def is_newer(remote: str | Version, current: str | Version | None) -> bool:
    """Decide if 'remote' should be considered newer than 'current'.

    Returns True iff remote > current, or when there is no current version.
    """
    if current is None:
        get_global_logger().verbose(
            "COMPARE", f"No current version, treating {str(remote)!r} as newer"
        )
        return True
    return compare_versions(remote, current) > 0


def describe(version: str | Version) -> ParseResult:
    """Return the original, canonical and token forms of a version."""
    v = _as_version(version)
    return ParseResult(original=v.original, canonical=v.canonical, tokens=v.tokens)


def explain(a: str | Version, b: str | Version) -> ComparisonResult:
    """Compare two versions and report the relation with its symbol."""
    va, vb = _as_version(a), _as_version(b)
    result = va.compare_to(vb)
    return ComparisonResult(
        left=va.original, right=vb.original, result=result, symbol=_SYMBOLS[result]
    )
