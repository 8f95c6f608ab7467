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

from typing import BinaryIO

from .dialects import Dialect
from .sink import SqlRenderable, write_text


class SymbolicToken(SqlRenderable):
  """
  A bare symbolic tag with no structured SQL form.

  Rendered as its textual representation, fully uppercased:
  "Global" -> GLOBAL, "if not exists" -> IF NOT EXISTS.
  """

  def token_text(self) -> str:
    return str(self)

  def write_sql(self, sink: BinaryIO, dialect: Dialect = Dialect.POSTGRES) -> int:
    return write_text(sink, self.token_text().upper())


class Keyword(str, SymbolicToken):
  """Plain string token, e.g. Keyword("unlogged")."""
