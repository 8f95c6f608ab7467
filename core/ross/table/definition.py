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

import logging
from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO, Optional, Sequence, Tuple

from ross.rendering.dialects import Dialect
from ross.rendering.sink import SqlRenderable, write_bytes, write_text
from ross.rendering.tokens import SymbolicToken

from .fields import TableField

log = logging.getLogger(__name__)

FIELD_SEPARATOR = b",\n\t"


class TableKind(SymbolicToken, Enum):
  """Optional table kind, rendered right after CREATE."""
  GLOBAL = "Global"
  LOCAL = "Local"

  def token_text(self) -> str:
    return self.value


@dataclass(frozen=True)
class TableOptions:
  name: str
  if_not_exists: bool = False
  kind: Optional[TableKind] = None


@dataclass(frozen=True)
class TableDefinition(SqlRenderable):
  """
  A table: ordered fields plus table-level options.

  Field order is the emitted column order. Rendering is a read-only
  projection; the instance is never mutated. Rendered layout:

    CREATE [<KIND> ]<name>[ IF NOT EXISTS] (\\n\\t<field>,\\n\\t<field>\\n)
  """
  fields: Tuple[TableField, ...]
  options: TableOptions

  def __init__(self, fields: Sequence[TableField], options: TableOptions):
    object.__setattr__(self, "fields", tuple(fields))
    object.__setattr__(self, "options", options)

  def _write_field(self, sink: BinaryIO, index: int, field: TableField, dialect: Dialect) -> int:
    written = 0
    if index > 0:
      written += write_bytes(sink, FIELD_SEPARATOR)
    return written + field.write_sql(sink, dialect)

  def write_sql(self, sink: BinaryIO, dialect: Dialect = Dialect.POSTGRES) -> int:
    total_bytes = write_bytes(sink, b"CREATE ")

    if self.options.kind is not None:
      total_bytes += self.options.kind.write_sql(sink, dialect)
      total_bytes += write_bytes(sink, b" ")

    total_bytes += write_text(sink, self.options.name)
    if self.options.if_not_exists:
      total_bytes += write_bytes(sink, b" IF NOT EXISTS")

    total_bytes += write_bytes(sink, b" (\n\t")

    # The first failing field aborts the sum; nothing is rolled back.
    total_bytes += sum(
      self._write_field(sink, index, field, dialect)
      for index, field in enumerate(self.fields)
    )

    total_bytes += write_bytes(sink, b"\n)")

    log.debug(
      "Rendered CREATE statement for table `%s` (%d fields, %d bytes, dialect=%s)",
      self.options.name, len(self.fields), total_bytes, dialect.value,
    )
    return total_bytes
