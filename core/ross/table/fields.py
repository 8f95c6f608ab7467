"""
ross - Table definition to SQL rendering
Copyright © 2025 The ross authors

This file is part of ross.

ross is free software: you can redistribute it and/or modify
it under the terms of the GNU Affero General Public License as
published by the Free Software Foundation, either version 3 of
the License, or (at your option) any later version.

ross is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU Affero General Public License for more details.

You should have received a copy of the GNU Affero General Public License
along with ross. If not, see <https://www.gnu.org/licenses/>.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Optional

from ross.rendering.dialects import Dialect
from ross.rendering.errors import UnsupportedColumnTypeError
from ross.rendering.sink import SqlRenderable, write_text

from .column_types import COLUMN_TYPE_VARIANTS, ColumnType


@dataclass(frozen=True)
class FieldOptions:
  """
  Per-column options shared by every column type.

  `nullable` is tri-state:
    None  -> no nullability clause
    True  -> NULL
    False -> NOT NULL
  """
  name: str
  primary_key: bool = False
  unique: bool = False
  nullable: Optional[bool] = None


@dataclass(frozen=True)
class TableField(SqlRenderable):
  """A single column: options plus column type."""
  options: FieldOptions
  kind: ColumnType

  def __post_init__(self):
    if not isinstance(self.kind, COLUMN_TYPE_VARIANTS):
      raise UnsupportedColumnTypeError(self.kind)

  def _clauses(self):
    # Fixed order: nullability, primary key, uniqueness.
    if self.options.nullable is not None:
      yield "NULL" if self.options.nullable else "NOT NULL"
    if self.options.primary_key:
      yield "PRIMARY KEY"
    if self.options.unique:
      yield "UNIQUE"

  def write_sql(self, sink: BinaryIO, dialect: Dialect = Dialect.POSTGRES) -> int:
    """
    Write "<name> <TYPE> [NULL|NOT NULL ][PRIMARY KEY ][UNIQUE ]".

    Every part, including the last one, carries its own trailing space.
    """
    total_bytes = write_text(sink, self.options.name)
    total_bytes += write_text(sink, " ")

    total_bytes += self.kind.write_sql(sink, dialect)
    total_bytes += write_text(sink, " ")

    for clause in self._clauses():
      total_bytes += write_text(sink, clause)
      total_bytes += write_text(sink, " ")

    return total_bytes
