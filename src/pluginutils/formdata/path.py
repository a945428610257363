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
Dot-delimited addresses into plugin form data.

A field name such as ``parent.child.grandchild`` addresses the key
``grandchild`` of the map stored under ``child`` of the map stored under
``parent``. Paths are split and validated once, here, and then consumed
segment by segment by the resolver. Literal dots inside a key cannot be
expressed.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Self, Union

from pluginutils.errors import InvalidPathError

SEPARATOR = "."


@dataclass(frozen=True)
class FieldPath:
    """Immutable, validated sequence of form data keys."""

    segments: tuple[str, ...]

    def __post_init__(self):
        if not self.segments:
            raise InvalidPathError("", "a path needs at least one segment")
        for segment in self.segments:
            if not isinstance(segment, str):
                raise InvalidPathError(
                    SEPARATOR.join(map(str, self.segments)),
                    f"segment {segment!r} is not a string",
                )
            if not segment:
                raise InvalidPathError(
                    SEPARATOR.join(self.segments), "empty segment"
                )

    @classmethod
    def parse(cls, field: Union[str, "FieldPath"]) -> Self:
        if isinstance(field, FieldPath):
            return field
        if not isinstance(field, str):
            raise InvalidPathError(repr(field), "expected a dot-delimited string")
        if not field:
            raise InvalidPathError(field, "a path needs at least one segment")
        return cls(tuple(field.split(SEPARATOR)))

    @classmethod
    def of(cls, segments: Iterable[str]) -> Self:
        return cls(tuple(segments))

    @property
    def head(self) -> str:
        return self.segments[0]

    @property
    def is_leaf(self) -> bool:
        return len(self.segments) == 1

    def child(self, segment: str) -> Self:
        return type(self)(self.segments + (segment,))

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[str]:
        return iter(self.segments)

    def __str__(self) -> str:
        return SEPARATOR.join(self.segments)


PathLike = Union[str, FieldPath]
