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

"""Exception hierarchy for mavenver.

Parsing is the only operation that can fail. Once a version string has
been turned into a `Version`, comparing and rendering it cannot raise.

- NumericOverflowError: a digit run does not fit in 63 bits

All exceptions inherit from MavenVerError, allowing users to catch every
mavenver error with a single except clause if needed.

Example:
    Rejecting oversized versions:
        ```python
        from mavenver import parse
        from mavenver.exceptions import NumericOverflowError

        try:
            version = parse("1.12345678901234567890")
        except NumericOverflowError as e:
            print(f"Unsupported version: {e}")
        ```
"""

from __future__ import annotations

__all__ = [
    "MavenVerError",
    "NumericOverflowError",
]


class MavenVerError(Exception):
    """Base exception for all mavenver errors."""

    pass


class NumericOverflowError(MavenVerError):
    """Raised when a numeric version component cannot be represented.

    Digit runs are limited to 18 significant digits (leading zeros are not
    counted), which keeps every component below 2^63. Longer runs are
    rejected instead of being truncated.

    Attributes:
        token: The offending digit run, as it appeared in the input.
        version: The full version string being parsed.
    """

    def __init__(self, token: str, version: str) -> None:
        self.token = token
        self.version = version
        super().__init__(
            f"numeric component {token!r} in version {version!r} exceeds "
            f"18 digits (numbers >= 2^63 are not supported)"
        )
