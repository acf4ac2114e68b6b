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

"""Exception hierarchy for smartvercmp.

Comparison itself never fails for string input: any two strings produce
an ordering. The only error the public API raises is for arguments that
are not strings at all:

- VersionTypeError: a version argument is not a ``str``

All exceptions inherit from SmartVerCmpError, allowing users to catch all
package errors with a single except clause if needed.

Example:
    Catching a bad argument:
        ```python
        from smartvercmp import compare
        from smartvercmp.exceptions import VersionTypeError

        try:
            compare(b"1.2", "1.3")
        except VersionTypeError as e:
            print(f"Bad version: {e}")
        ```
"""

from __future__ import annotations

__all__ = [
    "SmartVerCmpError",
    "VersionTypeError",
]


class SmartVerCmpError(Exception):
    """Base exception for all smartvercmp errors."""

    pass


class VersionTypeError(SmartVerCmpError, TypeError):
    """Raised when a version argument is not a string.

    Subclasses TypeError so callers that already guard against built-in
    type errors keep working.
    """

    pass
