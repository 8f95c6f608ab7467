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


class RenderError(Exception):
  """Base class for all rendering failures."""


class SinkWriteError(RenderError):
  """
  The byte sink rejected a write.

  The original exception raised by the sink is available as __cause__.
  Bytes written before the failure stay in the sink.
  """

  def __init__(self, nbytes: int, reason: str):
    super().__init__(f"Failed to write {nbytes} byte(s) to sink: {reason}")
    self.nbytes = nbytes


class InvalidTextError(RenderError):
  """Rendered bytes could not be decoded as UTF-8 text."""

  def __init__(self, reason: str):
    super().__init__(f"Rendered SQL is not valid UTF-8: {reason}")


class UnsupportedColumnTypeError(RenderError, TypeError):
  def __init__(self, value):
    super().__init__(
      f"Unsupported column type: {type(value).__name__}. "
      "Expected one of the variants in ross.table.column_types."
    )
