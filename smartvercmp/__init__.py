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

"""smartvercmp - compare version strings of unknown format.

Vulnerability feeds describe affected software with version strings in
whatever scheme the vendor used: "16.3.2", "95SE", "98SP1", "11b.4".
smartvercmp orders such strings without knowing the scheme up front,
which is enough to decide whether an installed version falls inside an
affected range.

Package Structure:
    versioning
        Segment tokenizer and comparison functions.
    logging
        Pluggable logger used to trace comparison decisions.
    exceptions
        Exception hierarchy.

Public API:
    from smartvercmp import compare, is_newer, latest, sort_versions, version_key

Example:
    >>> from smartvercmp import compare
    >>> compare("1.2", "1.2.1")
    -1
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("smartvercmp")
except PackageNotFoundError:
    __version__ = "0.0.0"

__license__ = "Apache-2.0"
__description__ = "Heuristic comparison of free-form software version strings"

from smartvercmp.exceptions import SmartVerCmpError, VersionTypeError
from smartvercmp.versioning import (
    compare,
    is_newer,
    latest,
    sort_versions,
    version_key,
)

__all__ = [
    "__version__",
    "__license__",
    "__description__",
    "compare",
    "is_newer",
    "latest",
    "sort_versions",
    "version_key",
    "SmartVerCmpError",
    "VersionTypeError",
]
