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
import re

from pluginutils.formdata.path import FieldPath

ACTION_CONFIGURATION = "actionConfiguration"
TEMPLATES_KEY = "pluginSpecifiedTemplates"
PLACEHOLDER_PREFIX = "$"

# Everything inside double or single quotes, quotes included, e.g.
# Earth "revolves'" '"around"' "the" 'sun' matches "revolves'", '"around"',
# "the" and 'sun'
MATCH_QUOTED_WORDS = re.compile(r"""(["'])(?:(?=(\\?))\2.)*?\1""")


def _check_non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


def template_value_path(index: int) -> FieldPath:
    """Path of the value of the index'th plugin specified template of an action."""
    _check_non_negative("index", index)
    return FieldPath.of(
        (ACTION_CONFIGURATION, f"{TEMPLATES_KEY}[{index}]", "value")
    )


def positional_label(ordinal: int) -> str:
    """Placeholder bound to the ordinal'th prepared statement parameter, e.g. $1."""
    return f"{PLACEHOLDER_PREFIX}{_check_non_negative('ordinal', ordinal)}"


def quoted_words(text: str) -> list[str]:
    return [m.group(0) for m in MATCH_QUOTED_WORDS.finditer(text or "")]
