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

import pytest

from ross.table.column_types import AutoIncrementInt, Boolean, FixedChar, Text
from ross.table.definition import TableDefinition, TableKind, TableOptions
from ross.table.fields import FieldOptions, TableField


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
  """Keep env vars and ./config lookups from leaking into tests."""
  for key in ("ROSS_SQL_DIALECT", "ROSS_DIALECT", "ROSS_PROFILE", "ROSS_PROFILES_PATH"):
    monkeypatch.delenv(key, raising=False)
  monkeypatch.chdir(tmp_path)
  yield


@pytest.fixture
def posts_table():
  return TableDefinition(
    options=TableOptions(name="posts", if_not_exists=True, kind=TableKind.GLOBAL),
    fields=[
      TableField(FieldOptions(name="id", primary_key=True), AutoIncrementInt()),
      TableField(FieldOptions(name="title", nullable=False), FixedChar(max_length=10)),
      TableField(FieldOptions(name="body", nullable=False), Text()),
      TableField(FieldOptions(name="published", nullable=False), Boolean()),
    ],
  )
