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
from typing import Optional


class PluginUtilsError(Exception):
    """Base class for errors raised by the plugin helpers"""


class InvalidPathError(PluginUtilsError, ValueError):
    def __init__(self, path: Optional[str], reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid form data path {path!r}: {reason}")


class MetadataReadError(PluginUtilsError):
    """A column name could not be read from result metadata.

    The underlying driver error is always available as ``__cause__``.
    """

    def __init__(self, index: int, message: Optional[str] = None):
        self.index = index
        super().__init__(
            message or f"Unable to read the name of column {index} from metadata"
        )
