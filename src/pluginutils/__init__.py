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
from pluginutils.errors import PluginUtilsError, InvalidPathError, MetadataReadError
from pluginutils.formdata import (
    FieldPath,
    get_value,
    set_value,
    has_value,
    template_value_path,
    positional_label,
    quoted_words,
)
from pluginutils.inspection import (
    CursorMetadata,
    LocalhostGuard,
    list_columns,
    find_duplicates,
    is_local_endpoint,
    hint_for_localhost,
)
from pluginutils.models import DatasourceConfiguration, Endpoint

__all__ = [
    "PluginUtilsError",
    "InvalidPathError",
    "MetadataReadError",
    "FieldPath",
    "get_value",
    "set_value",
    "has_value",
    "template_value_path",
    "positional_label",
    "quoted_words",
    "CursorMetadata",
    "LocalhostGuard",
    "list_columns",
    "find_duplicates",
    "is_local_endpoint",
    "hint_for_localhost",
    "DatasourceConfiguration",
    "Endpoint",
]
