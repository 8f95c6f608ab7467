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

import io
from typing import BinaryIO, Tuple

from .dialects import Dialect
from .errors import InvalidTextError, SinkWriteError

"""
Shared rendering capability.

Every entity that appears in rendered SQL (tokens, column types, fields,
whole tables) derives from SqlRenderable and writes itself into a byte sink.
Composite entities only call write_sql() on their children and add their
own punctuation; they never inspect a child's fields.
"""


def write_bytes(sink: BinaryIO, data: bytes) -> int:
  """
  Write raw bytes to the sink and return the number of bytes written.

  Sinks that return None from write() (some buffered wrappers do) are
  counted as having accepted the full payload. A short count is returned
  as reported; nothing is retried. Text-mode sinks (io.StringIO, files
  opened without "b") reject bytes and fail with SinkWriteError.
  """
  try:
    written = sink.write(data)
  except (OSError, ValueError, TypeError) as exc:
    raise SinkWriteError(len(data), str(exc)) from exc
  return len(data) if written is None else written


def write_text(sink: BinaryIO, text: str) -> int:
  return write_bytes(sink, text.encode("utf-8"))


class SqlRenderable:
  """
  Base class for anything that renders itself as SQL text.

  Subclasses implement write_sql(); to_sql() is derived from it.
  Mixed into Enum types (see TableKind), so it does not use ABCMeta.
  """

  def write_sql(self, sink: BinaryIO, dialect: Dialect = Dialect.POSTGRES) -> int:
    """
    Write the canonical SQL form to `sink` and return the bytes written.
    Sink failures are raised as SinkWriteError and abort the render.
    """
    raise NotImplementedError(
      f"{self.__class__.__name__} does not implement write_sql()"
    )

  def to_sql(self, dialect: Dialect = Dialect.POSTGRES) -> Tuple[str, int]:
    """
    Render into an in-memory buffer and return (sql_text, bytes_written).
    """
    buffer = io.BytesIO()
    bytes_written = self.write_sql(buffer, dialect)
    try:
      text = buffer.getvalue().decode("utf-8")
    except UnicodeDecodeError as exc:
      raise InvalidTextError(str(exc)) from exc
    return text, bytes_written
