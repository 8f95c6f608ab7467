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
from typing import BinaryIO, Union, get_args

from ross.rendering.dialects import Dialect
from ross.rendering.errors import UnsupportedColumnTypeError
from ross.rendering.sink import SqlRenderable, write_text

"""
Column type model.

A closed set of PostgreSQL column types. Each variant renders exactly one
uppercase type token; parameterized variants embed their argument verbatim.
No bounds checks happen here (FixedChar(0) renders CHAR(0)); see
ross.table.validators for construction-time checks.
"""


class _ColumnTypeBase(SqlRenderable):
  def write_sql(self, sink: BinaryIO, dialect: Dialect = Dialect.POSTGRES) -> int:
    return write_text(sink, render_column_type(self))


@dataclass(frozen=True)
class FixedChar(_ColumnTypeBase):
  """CHAR(n)"""
  max_length: int


@dataclass(frozen=True)
class VarChar(_ColumnTypeBase):
  pass


@dataclass(frozen=True)
class AutoIncrementInt(_ColumnTypeBase):
  """32-bit auto-incrementing integer (SERIAL)."""
  pass


@dataclass(frozen=True)
class BigInt(_ColumnTypeBase):
  pass


@dataclass(frozen=True)
class AutoIncrementBigInt(_ColumnTypeBase):
  """64-bit auto-incrementing integer (BIGSERIAL)."""
  pass


@dataclass(frozen=True)
class Text(_ColumnTypeBase):
  pass


@dataclass(frozen=True)
class Boolean(_ColumnTypeBase):
  pass


@dataclass(frozen=True)
class FixedBit(_ColumnTypeBase):
  """BIT(n)"""
  length: int


ColumnType = Union[
  FixedChar,
  VarChar,
  AutoIncrementInt,
  BigInt,
  AutoIncrementBigInt,
  Text,
  Boolean,
  FixedBit,
]

# Every concrete variant class, for isinstance checks.
COLUMN_TYPE_VARIANTS = get_args(ColumnType)


def render_column_type(column_type: ColumnType) -> str:
  """
  Map a column type variant to its SQL type token.

  Raises:
      UnsupportedColumnTypeError: for anything outside the closed variant set.
  """
  if isinstance(column_type, FixedChar):
    return f"CHAR({column_type.max_length})"
  if isinstance(column_type, VarChar):
    return "VARCHAR"
  if isinstance(column_type, Text):
    return "TEXT"
  if isinstance(column_type, AutoIncrementInt):
    return "SERIAL"
  if isinstance(column_type, BigInt):
    return "BIGINT"
  if isinstance(column_type, AutoIncrementBigInt):
    return "BIGSERIAL"
  if isinstance(column_type, Boolean):
    return "BOOLEAN"
  if isinstance(column_type, FixedBit):
    return f"BIT({column_type.length})"

  raise UnsupportedColumnTypeError(column_type)
