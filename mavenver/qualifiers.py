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

"""Well-known qualifier table for mavenver.

Textual version components are ranked against a fixed list of known
qualifiers, in increasing order of precedence:

    alpha < beta < milestone < rc < snapshot < "" (release) < sp

Unknown qualifiers sort after every known one and lexically among
themselves. Ranks are returned as strings so that both cases can be
compared with plain string comparison: known qualifiers map to their list
index ("0".."6"), unknown ones to "7-<text>".

Examples:
    >>> qualifier_rank("rc")
    '3'
    >>> qualifier_rank("abc")
    '7-abc'
    >>> make_qualifier("a", followed_by_digit=True)
    'alpha'
    >>> make_qualifier("cr", followed_by_digit=False)
    'rc'
"""

from __future__ import annotations

QUALIFIERS: tuple[str, ...] = (
    "alpha",
    "beta",
    "milestone",
    "rc",
    "snapshot",
    "",
    "sp",
)

ALIASES: dict[str, str] = {
    "ga": "",
    "final": "",
    "release": "",
    "cr": "rc",
}

# Only applied when the letter sits right before a number: a1, b2, m3
_SHORT_FORMS: dict[str, str] = {
    "a": "alpha",
    "b": "beta",
    "m": "milestone",
}


def qualifier_rank(qualifier: str) -> str:
    """Return a string key that orders qualifiers by precedence.

    Args:
        qualifier: Lowercase qualifier text, already aliased.

    Returns:
        The index in QUALIFIERS as a string, or "<len>-<qualifier>" for
        qualifiers outside the table.
    """
    try:
        return str(QUALIFIERS.index(qualifier))
    except ValueError:
        return f"{len(QUALIFIERS)}-{qualifier}"


# Rank of the empty qualifier; anything below it is a pre-release.
RELEASE_RANK = qualifier_rank("")


def make_qualifier(text: str, followed_by_digit: bool) -> str:
    """Expand short forms and resolve aliases for a qualifier token.

    Args:
        text: Lowercase non-digit token.
        followed_by_digit: True when the token ended because a digit run
            started right after it.

    Returns:
        The qualifier text to store on the item.
    """
    if followed_by_digit and len(text) == 1:
        text = _SHORT_FORMS.get(text, text)
    return ALIASES.get(text, text)
