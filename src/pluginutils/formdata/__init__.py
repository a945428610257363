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
Form data addressing for plugin integrations.

- FieldPath: validated dot-delimited addresses
- Resolver: reading and writing values in nested form data
- Labels: canonical template paths and prepared statement placeholders
"""

from .path import FieldPath
from .resolver import get_value, set_value, has_value
from .labels import template_value_path, positional_label, quoted_words

__all__ = [
    "FieldPath",
    "get_value",
    "set_value",
    "has_value",
    "template_value_path",
    "positional_label",
    "quoted_words",
]
