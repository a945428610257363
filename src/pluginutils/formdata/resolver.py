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
Read and write values in plugin form data.

Form data is an untyped tree of string keyed maps authored through the
property pane. Reads are forgiving: a missing key, or a scalar found where a
nested map was expected, simply means the value was never configured. Writes
create missing intermediate maps on the way down.
"""

from collections.abc import Mapping, MutableMapping
from typing import Any, Optional

import structlog

from pluginutils.errors import InvalidPathError
from pluginutils.formdata.path import FieldPath, PathLike

logger = structlog.get_logger(__name__)

FormData = MutableMapping[str, Any]


def _get(node: Any, segments: tuple[str, ...], depth: int) -> Any:
    match node:
        case Mapping() if node:
            value = node.get(segments[depth])
        case _:
            # absent, empty, or a leaf where a nested map was expected
            return None

    if depth == len(segments) - 1:
        return value
    return _get(value, segments, depth + 1)


def get_value(form_data: Optional[Mapping[str, Any]], field: PathLike) -> Any:
    """
    Get the value stored at ``field`` in ``form_data``.

    Args:
        form_data: The form data tree, may be None
        field: A FieldPath or dot-delimited string such as ``parent.child``

    Returns:
        The stored value, or None if any part of the path is not configured

    Raises:
        InvalidPathError: If the path is empty or has an empty segment
    """
    path = FieldPath.parse(field)
    return _get(form_data, path.segments, 0)


def has_value(form_data: Optional[Mapping[str, Any]], field: PathLike) -> bool:
    return get_value(form_data, field) is not None


def set_value(
    form_data: Optional[FormData], field: PathLike, value: Any
) -> FormData:
    """
    Set ``value`` at ``field``, creating intermediate maps as needed.

    The tree is modified in place. If ``form_data`` is None a new dict is
    created, so callers must always use the returned tree.

    Args:
        form_data: The form data tree, may be None
        field: A FieldPath or dot-delimited string such as ``parent.child``
        value: The value to store; replaces whatever was at the key before

    Returns:
        The tree that now holds the value

    Raises:
        InvalidPathError: If the path is empty, has an empty segment, or an
            existing intermediate value is not a map, or the
            tree itself is not a map
    """
    path = FieldPath.parse(field)
    if form_data is None:
        form_data = {}
    elif not isinstance(form_data, MutableMapping):
        raise InvalidPathError(
            str(path), f"root is a {type(form_data).__name__}, not a map"
        )

    node = form_data
    for depth, key in enumerate(path.segments[:-1]):
        # a key mapped to None is treated as absent
        if node.get(key) is None:
            logger.debug(
                "form_data_map_created",
                path=".".join(path.segments[: depth + 1]),
            )
            node[key] = {}
        nested = node[key]
        if not isinstance(nested, MutableMapping):
            prefix = ".".join(path.segments[: depth + 1])
            logger.warning(
                "form_data_path_blocked",
                path=str(path),
                prefix=prefix,
                found=type(nested).__name__,
            )
            raise InvalidPathError(
                str(path),
                f"'{prefix}' holds a {type(nested).__name__}, not a map",
            )
        node = nested

    node[path.segments[-1]] = value
    return form_data
