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
Column Inspector - Column Names and Duplicate Detection.

This module reads the ordered column names of a query result from its
metadata and finds names that occur more than once, so that generated
templates can disambiguate them.
"""

from collections import Counter
from typing import Any, Iterable, Optional, Protocol, Sequence, runtime_checkable

import structlog

from pluginutils.errors import MetadataReadError

logger = structlog.get_logger(__name__)


@runtime_checkable
class ResultMetadata(Protocol):
    """Result set metadata with 1-based column indexes."""

    def column_count(self) -> int: ...

    def column_name(self, index: int) -> str: ...


class CursorMetadata:
    """
    Adapts a DB-API 2.0 ``cursor.description`` to ResultMetadata.

    The description is a sequence of 7-item sequences whose first item is the
    column name. It is None when the last statement produced no result set.
    """

    def __init__(self, description: Optional[Sequence[Sequence[Any]]]):
        self.description = description

    @classmethod
    def from_cursor(cls, cursor: Any) -> "CursorMetadata":
        return cls(cursor.description)

    def column_count(self) -> int:
        return len(self.description) if self.description is not None else 0

    def column_name(self, index: int) -> str:
        if index < 1:
            raise IndexError(f"column indexes start at 1, got {index}")
        return self.description[index - 1][0]


def list_columns(metadata: ResultMetadata) -> list[str]:
    """
    List column names in result set order.

    Args:
        metadata: Result metadata; indexes run from 1 to column_count()

    Returns:
        Column names, first column first

    Raises:
        MetadataReadError: If the count or any name cannot be read. No
            partial list is returned.
    """
    try:
        count = metadata.column_count()
    except Exception as e:
        logger.debug("column_metadata_unreadable", index=0)
        raise MetadataReadError(
            0, "Unable to read the column count from metadata"
        ) from e

    columns = []
    for index in range(1, count + 1):
        try:
            columns.append(metadata.column_name(index))
        except Exception as e:
            logger.debug("column_metadata_unreadable", index=index, count=count)
            raise MetadataReadError(index) from e

    logger.debug("columns_listed", count=count)
    return columns


def find_duplicates(names: Iterable[str]) -> set[str]:
    """
    Find column names that appear more than once.

    Args:
        names: Column names; matching is exact and case-sensitive

    Returns:
        The set of names whose frequency is greater than one
    """
    frequencies = Counter(names)
    duplicates = {name for name, count in frequencies.items() if count > 1}

    if duplicates:
        logger.debug("duplicate_columns_found", columns=sorted(duplicates))

    return duplicates
