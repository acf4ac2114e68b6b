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

"""Version tokenizing and comparison for smartvercmp.

Modules:
    segments
        Splits a version string into segments: a leading digit run plus
        any trailing non-separator text, delimited by ASCII punctuation.
    keys
        Segment-wise comparison and the sorting helpers built on it.

Public API:
    compare
        Compare two version strings, returning -1, 0, or 1.
    is_newer
        Check if a remote version is newer than the current version.
    version_key
        Sort key for sorted(), min() and max().
    sort_versions
        Sort an iterable of version strings.
    latest
        Pick the newest version from an iterable.
    parse_segment
        Measure the first segment of a version string.
    is_separator
        Test whether a character delimits segments.

How Comparison Works:
    Both strings are walked one segment at a time. A longer leading digit
    run wins outright ("10" > "9"), otherwise the segment text is compared
    by code point ("SE" < "SP"). Separators themselves are ignored, so
    "1-2" equals "1.2". If all segments tie, the longer string wins.

Example:
    >>> from smartvercmp.versioning import compare, latest
    >>> compare("16.3.2", "3.7.0")
    1
    >>> compare("95SE", "98SP1")
    -1
    >>> latest(["1.2", "1.10", "1.9"])
    '1.10'

Note:
    The comparison assumes both strings use the same numbering scheme.
    "2000" vs "11.7" returns a stable answer that carries no meaning.
"""

from .keys import (
    compare,
    is_newer,
    latest,
    sort_versions,
    version_key,
)
from .segments import is_separator, parse_segment

__all__ = [
    "compare",
    "is_newer",
    "is_separator",
    "latest",
    "parse_segment",
    "sort_versions",
    "version_key",
]
