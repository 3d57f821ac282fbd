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

"""Trailing-item normalization for parsed version lists.

Trailing components that carry no ordering information are dropped so
that "1.0.0" and "1" parse to the same tree, as do "1-0" and "1".

The scan runs from the end of one list towards its start:

- a null item (0, "", empty list) is removed and the scan continues
- a non-null number or qualifier stops the scan
- a non-null nested list is kept but does NOT stop the scan, so
  "1.0-1" trims the 0 in front of the "-1" group and equals "1-1"

Normalization is applied to one level at a time; the tokenizer calls it on
every list, innermost first.
"""

from __future__ import annotations

from .items import ListItem, is_null


def normalize(items: ListItem) -> None:
    """Remove insignificant trailing items from one list level in place."""
    for i in range(len(items.items) - 1, -1, -1):
        item = items.items[i]
        if is_null(item):
            del items.items[i]
        elif not isinstance(item, ListItem):
            break
