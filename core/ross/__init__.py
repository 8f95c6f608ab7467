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

from ross.rendering.dialects import Dialect, get_active_dialect
from ross.rendering.errors import (
  InvalidTextError,
  RenderError,
  SinkWriteError,
  UnsupportedColumnTypeError,
)
from ross.rendering.sink import SqlRenderable
from ross.rendering.tokens import Keyword, SymbolicToken
from ross.table.column_types import (
  AutoIncrementBigInt,
  AutoIncrementInt,
  BigInt,
  Boolean,
  ColumnType,
  FixedBit,
  FixedChar,
  Text,
  VarChar,
)
from ross.table.definition import TableDefinition, TableKind, TableOptions
from ross.table.fields import FieldOptions, TableField

__all__ = [
  "AutoIncrementBigInt",
  "AutoIncrementInt",
  "BigInt",
  "Boolean",
  "ColumnType",
  "Dialect",
  "FieldOptions",
  "FixedBit",
  "FixedChar",
  "InvalidTextError",
  "Keyword",
  "RenderError",
  "SinkWriteError",
  "SqlRenderable",
  "SymbolicToken",
  "TableDefinition",
  "TableField",
  "TableKind",
  "TableOptions",
  "Text",
  "UnsupportedColumnTypeError",
  "VarChar",
  "get_active_dialect",
]
