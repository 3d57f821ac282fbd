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

"""Public API return types for mavenver.

These dataclasses describe parsed versions and comparison outcomes in a
form that is convenient to print or serialize. They are returned by
`describe()` and `explain()` and used by the CLI.

All dataclasses are frozen (immutable) to prevent accidental mutation of
return values.

Example:
    ```python
    from mavenver import explain

    result = explain("1.0-alpha-1", "1.0")
    print(f"{result.left} {result.symbol} {result.right}")  # 1.0-alpha-1 < 1.0
    ```
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParseResult:
    """Description of one parsed version.

    Attributes:
        original: Version string exactly as given.
        canonical: Canonical form (e.g., "1-alpha-1" for "1.0alpha1").
        tokens: Bracketed item tree (e.g., "[1, [alpha, [1]]]").
    """

    original: str
    canonical: str
    tokens: str


@dataclass(frozen=True)
class ComparisonResult:
    """Outcome of comparing two versions.

    Attributes:
        left: Original string of the left-hand version.
        right: Original string of the right-hand version.
        result: -1, 0 or 1.
        symbol: "<", "==" or ">".
    """

    left: str
    right: str
    result: int
    symbol: str
