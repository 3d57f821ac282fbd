"""
mavenver - Maven-compatible version comparison

Parses free-form version strings ("1.0.1", "1.0-alpha-1", "2.0.0.RC1")
and orders them the way Maven's ComparableVersion does: arbitrary length,
mixed numeric and textual components, "." and "-" separators, and
well-known qualifiers ranked alpha < beta < milestone < rc < snapshot <
release < sp.

Quick Start
-----------
    >>> from mavenver import parse, compare_versions
    >>> parse("1.0-alpha-1") < parse("1.0")
    True
    >>> compare_versions("1.0-cr1", "1.0-rc1")
    0
    >>> sorted(["1.0", "1.0-rc1", "1.0-sp"], key=parse)
    ['1.0-rc1', '1.0', '1.0-sp']

From the shell:

    $ mavenver compare 1.0-alpha-1 1.0 1.0-sp

Package Structure
-----------------
version : module
    Version type, parse/compare and convenience helpers.
tokenizer : module
    Single-pass scanner building the item tree.
items : module
    Item kinds (numbers, qualifiers, lists) and their null rules.
qualifiers : module
    Fixed qualifier ranking and aliases.
normalize : module
    Trailing-null trimming.
comparator : module
    Recursive item comparison.
canonical : module
    Canonical and token-list rendering.
cli : module
    Command-line interface with argparse.
"""

__version__ = "0.1.0"
__license__ = "Apache-2.0"
__description__ = "Maven-compatible version parsing and ordering"

from mavenver.exceptions import MavenVerError, NumericOverflowError
from mavenver.results import ComparisonResult, ParseResult
from mavenver.version import (
    Version,
    compare,
    compare_versions,
    describe,
    explain,
    is_newer,
    parse,
)

__all__ = [
    "__version__",
    "__license__",
    "__description__",
    "ComparisonResult",
    "MavenVerError",
    "NumericOverflowError",
    "ParseResult",
    "Version",
    "compare",
    "compare_versions",
    "describe",
    "explain",
    "is_newer",
    "parse",
]
