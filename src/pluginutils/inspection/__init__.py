#
#  Copyright (C) 2017-2025 Dremio Corporation
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.
#
"""
Inspection helpers run by plugins around query execution and datasource
validation.

- Columns: result set column names and duplicate detection
- Localhost: advisory hints for datasources pointing at the local machine
"""

from .columns import ResultMetadata, CursorMetadata, list_columns, find_duplicates
from .localhost import LocalhostGuard, is_local_endpoint, hint_for_localhost

__all__ = [
    "ResultMetadata",
    "CursorMetadata",
    "list_columns",
    "find_duplicates",
    "LocalhostGuard",
    "is_local_endpoint",
    "hint_for_localhost",
]
