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

"""Rendering of parsed item trees.

Two text forms are produced:

- canonical: the version written back with normalized components, e.g.
  "1.0alpha1" -> "1-alpha-1". Parsing the canonical form of an ordinary
  version gives an equal version.
- tokens: a bracketed dump of the tree, e.g. "[1, [alpha, [1]]]", handy
  when debugging why two versions compare the way they do.
"""

from __future__ import annotations

from .items import CLOSE, OPEN, Item, flatten


def render_canonical(item: Item) -> str:
    """Render an item tree in canonical version syntax.

    Consecutive list members are joined with "-" when the second one is a
    nested list and with "." otherwise.
    """
    parts: list[str] = []
    previous = None
    for event in flatten(item):
        if event is CLOSE:
            previous = event
            continue
        if previous is not None and previous is not OPEN:
            parts.append("-" if event is OPEN else ".")
        if event is not OPEN:
            parts.append(str(event))
        previous = event
    return "".join(parts)


def render_tokens(item: Item) -> str:
    """Render an item tree as nested bracketed lists."""
    parts: list[str] = []
    previous = None
    for event in flatten(item):
        if event is not CLOSE and previous is not None and previous is not OPEN:
            parts.append(", ")
        parts.append(str(event))
        previous = event
    return "".join(parts)
