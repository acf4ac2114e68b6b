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

"""Version segment tokenizer.

A version segment is a run of ASCII digits, optionally followed by other
non-separator characters, up to the next ASCII punctuation character or
the end of the string. "11b" and "98SP1" are single segments; "1.2" is two.
"""

from __future__ import annotations


def is_separator(ch: str) -> bool:
    """Return True if ch is printable ASCII punctuation.

    That is every character from "!" to "~" except 0-9, A-Z and a-z.
    Space is not a separator.
    """
    return "!" <= ch <= "~" and not (
        "0" <= ch <= "9" or "A" <= ch <= "Z" or "a" <= ch <= "z"
    )


def parse_segment(s: str) -> tuple[int, int, int]:
    """Measure the first version segment of s.

    Args:
        s: Non-empty remainder of a version string.

    Returns:
        A tuple (num_len, cmp_end, skip) where num_len is the length of the
        leading ASCII digit run, s[:cmp_end] is the text to compare, and the
        next segment starts at s[skip:]. The separator between cmp_end and
        skip is dropped.

    Raises:
        ValueError: If s is empty.

    Example:
        >>> parse_segment("11b.4.16-New_Year_Edition")
        (2, 3, 4)
        >>> parse_segment("2000")
        (4, 4, 4)
    """
    if not s:
        raise ValueError("cannot parse a segment from an empty string")

    n = len(s)
    num = 0
    # str.isdigit() also accepts non-ASCII digits
    while num < n and "0" <= s[num] <= "9":
        num += 1
    if num == n:
        return num, num, num

    for i, ch in enumerate(s):
        if is_separator(ch):
            return num, i, i + 1
    return num, n, n
