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

from collections import Counter
from typing import List

from .column_types import FixedBit, FixedChar
from .definition import TableDefinition

"""
Construction-time checks for table definitions.

Rendering never validates; callers that want guarantees run these first.
Reserved words are not checked.
"""


class TableDefinitionError(ValueError):
  def __init__(self, table_name: str, issues: List[str]):
    super().__init__(
      "Invalid definition for table `%s`:\n%s" % (table_name, "\n".join(issues))
    )
    self.issues = issues


def validate_table_definition(table: TableDefinition) -> List[str]:
  """
  Return a list of human-readable issues; empty means valid.
  """
  issues: List[str] = []

  if not table.options.name:
    issues.append("table name must not be empty.")

  if not table.fields:
    issues.append("table has no fields.")

  names = [f.options.name for f in table.fields]
  if any(not n for n in names):
    issues.append("field names must not be empty.")

  for name, count in sorted(Counter(n for n in names if n).items()):
    if count > 1:
      issues.append(f"field '{name}' is defined {count} times.")

  for f in table.fields:
    kind = f.kind
    if isinstance(kind, FixedChar) and kind.max_length <= 0:
      issues.append(
        f"field '{f.options.name}': CHAR length must be positive (got {kind.max_length})."
      )
    if isinstance(kind, FixedBit) and kind.length <= 0:
      issues.append(
        f"field '{f.options.name}': BIT length must be positive (got {kind.length})."
      )
    if f.options.primary_key and f.options.nullable is True:
      issues.append(
        f"field '{f.options.name}': primary key column cannot be NULL."
      )

  pk_names = [f.options.name for f in table.fields if f.options.primary_key]
  if len(pk_names) > 1:
    issues.append(
      f"multiple primary key columns: {', '.join(pk_names)}."
    )

  return issues


def validate_or_raise(table: TableDefinition) -> None:
  issues = validate_table_definition(table)
  if issues:
    raise TableDefinitionError(table.options.name, issues)
