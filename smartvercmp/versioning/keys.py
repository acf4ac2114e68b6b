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

"""Schema-free version comparison.

This module is format-agnostic: it assumes only that both strings follow
the same versioning convention, whatever it is. It gives meaningful
answers for "95SE" vs "98SP1" or "16.3.2" vs "3.7.0", but not for
"2000" vs "11.7", where the two sides number their releases differently.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import cmp_to_key
from typing import Any

from smartvercmp.exceptions import VersionTypeError
from smartvercmp.logging import Logger, get_global_logger

from .segments import parse_segment


def _require_str(value: object, name: str) -> None:
    if not isinstance(value, str):
        raise VersionTypeError(
            f"{name} must be a str, got {type(value).__name__}: {value!r}"
        )


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def compare(v1: str, v2: str, *, logger: Logger | None = None) -> int:
    """Compare two version strings segment by segment.

    Each segment's leading digit run is compared by length first, so
    "10" beats "9" without converting either to a number (and "010"
    beats "9" too: leading zeros are not stripped). Segments with
    equally long digit runs are compared as plain text up to the next
    separator. When every segment compared so far is equal, the longer
    input string wins.

    Args:
        v1: First version string.
        v2: Second version string.
        logger: Receives a debug trace of the deciding rule. Defaults to
            the global logger.

    Returns:
        -1 if v1 < v2, 0 if equal, 1 if v1 > v2.

    Raises:
        VersionTypeError: If either argument is not a str.

    Example:
        >>> compare("1.9", "1.10")
        -1
        >>> compare("1-2", "1.2")
        0
    """
    _require_str(v1, "v1")
    _require_str(v2, "v2")
    if logger is None:
        logger = get_global_logger()

    s1, s2 = v1, v2
    while s1 and s2:
        num1, end1, skip1 = parse_segment(s1)
        num2, end2, skip2 = parse_segment(s2)
        if num1 != num2:
            result = _sign(num1 - num2)
            logger.debug(
                "VERSION",
                f"{s1[:end1]!r} vs {s2[:end2]!r}: digit run {num1} "
                f"{'>' if result > 0 else '<'} {num2}",
            )
            return result

        part1, part2 = s1[:end1], s2[:end2]
        if part1 != part2:
            result = 1 if part1 > part2 else -1
            logger.debug(
                "VERSION",
                f"{part1!r} {'>' if result > 0 else '<'} {part2!r}",
            )
            return result

        s1 = s1[skip1:]
        s2 = s2[skip2:]

    # everything compared so far is equal, the longest wins
    result = _sign(len(v1) - len(v2))
    logger.debug(
        "VERSION",
        f"segments equal, length {len(v1)} vs {len(v2)} -> {result}",
    )
    return result


def is_newer(
    remote: str,
    current: str | None,
    *,
    logger: Logger | None = None,
) -> bool:
    """Decide if 'remote' should be considered newer than 'current'.

    Returns True iff remote > current. A None current version means
    nothing is installed, so any remote version counts as newer.
    """
    if logger is None:
        logger = get_global_logger()

    _require_str(remote, "remote")
    if current is None:
        logger.verbose(
            "VERSION", f"No current version. Treat {remote!r} as newer"
        )
        return True

    cmpv = compare(remote, current, logger=logger)
    if cmpv > 0:
        logger.verbose("VERSION", f"{remote!r} is newer than {current!r}")
    elif cmpv == 0:
        logger.verbose("VERSION", f"{remote!r} is the same as {current!r}")
    else:
        logger.verbose("VERSION", f"{remote!r} is older than {current!r}")
    return cmpv > 0


_VersionKey = cmp_to_key(compare)


def version_key(v: str) -> Any:
    """Return a sort key ordering version strings by compare().

    Example:
        >>> sorted(["1.10", "1.9", "1.2"], key=version_key)
        ['1.2', '1.9', '1.10']
    """
    _require_str(v, "v")
    return _VersionKey(v)


def sort_versions(versions: Iterable[str], *, reverse: bool = False) -> list[str]:
    """Sort version strings oldest first (newest first with reverse=True).

    The sort is stable: versions that compare equal, such as "1-2" and
    "1.2", keep their input order.
    """
    return sorted(versions, key=version_key, reverse=reverse)


def latest(versions: Iterable[str]) -> str | None:
    """Return the newest version, or None if there are none.

    Among versions that compare equal the first one seen is returned.
    """
    best: str | None = None
    for v in versions:
        _require_str(v, "version")
        if best is None or compare(v, best) > 0:
            best = v
    return best
