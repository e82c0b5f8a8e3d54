# This file defines the column allow-list that maps request-facing sort keys to trusted SQL.
# It exists so sort requests can only ever reach SQL through an expression the report author wrote.
# Descriptors keep their declaration order, which is also the left-to-right header order.
# Lookups of keys outside the list fail loudly because they mean a tampered request or bad config.

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from src.report_pager.errors import UnknownColumnError


class ColumnDescriptor(BaseModel):
    """One report column as declared by the report author."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    key: str = Field(min_length=1, validation_alias=AliasChoices("key", "get"))
    sql_expression: str = Field(min_length=1, validation_alias=AliasChoices("sql_expression", "sql"))
    display_label: str = Field(validation_alias=AliasChoices("display_label", "display"))
    sortable: bool = True


class ColumnAllowList:
    """Ordered, key-unique collection of column descriptors."""

    def __init__(self, columns: Iterable[ColumnDescriptor]) -> None:
        self._columns: dict[str, ColumnDescriptor] = {}
        for column in columns:
            if column.key in self._columns:
                raise ValueError(f"Duplicate column key in allow-list: {column.key!r}")
            self._columns[column.key] = column

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> ColumnAllowList:
        return cls(ColumnDescriptor.model_validate(dict(record)) for record in records)

    def __iter__(self) -> Iterator[ColumnDescriptor]:
        return iter(self._columns.values())

    def __len__(self) -> int:
        return len(self._columns)

    def __contains__(self, key: object) -> bool:
        return key in self._columns

    def keys(self) -> list[str]:
        return list(self._columns)

    def get(self, key: str | None) -> ColumnDescriptor | None:
        if key is None:
            return None
        return self._columns.get(key)

    def resolve(self, key: str | None) -> ColumnDescriptor:
        column = self.get(key)
        if column is None:
            raise UnknownColumnError(key)
        return column
