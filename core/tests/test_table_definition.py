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

import io
import logging

import pytest

from ross.rendering.dialects import Dialect
from ross.rendering.errors import SinkWriteError
from ross.table.column_types import AutoIncrementBigInt, Boolean, FixedBit, Text, VarChar
from ross.table.definition import TableDefinition, TableKind, TableOptions
from ross.table.fields import FieldOptions, TableField
from tests._sink_test_helpers import FailingSink, POSTS_SQL


def _table(fields, **options):
  options.setdefault("name", "t")
  return TableDefinition(fields=fields, options=TableOptions(**options))


def test_posts_table_renders_exactly(posts_table):
  sql, written = posts_table.to_sql()
  assert sql == POSTS_SQL
  assert written == len(POSTS_SQL.encode("utf-8"))


def test_rendering_is_deterministic(posts_table):
  first = posts_table.to_sql()
  second = posts_table.to_sql()
  assert first == second


def test_write_sql_count_matches_to_sql_text(posts_table):
  sink = io.BytesIO()
  written = posts_table.write_sql(sink, Dialect.POSTGRES)
  sql, _ = posts_table.to_sql()
  assert written == len(sink.getvalue())
  assert sink.getvalue().decode("utf-8") == sql


def test_field_separator_count(posts_table):
  sql, _ = posts_table.to_sql()
  body = sql[sql.index("(\n\t") + 3:]
  assert body.count(",\n\t") == len(posts_table.fields) - 1
  assert not body.rstrip("\n)").endswith(",")
  assert sql.endswith(" \n)")


def test_single_field_table_has_no_comma():
  table = _table([TableField(FieldOptions(name="flag"), FixedBit(length=1))], name="flags")
  sql, _ = table.to_sql()
  assert sql == "CREATE flags (\n\tflag BIT(1) \n)"
  assert "," not in sql


def test_kind_is_omitted_when_absent():
  table = _table([TableField(FieldOptions(name="id"), AutoIncrementBigInt())], name="events")
  sql, _ = table.to_sql()
  assert sql.startswith("CREATE events (")


@pytest.mark.parametrize(
  "kind, prefix",
  [
    (TableKind.GLOBAL, "CREATE GLOBAL users"),
    (TableKind.LOCAL, "CREATE LOCAL users"),
  ],
)
def test_kind_is_uppercased(kind, prefix):
  table = _table([TableField(FieldOptions(name="name"), VarChar())], name="users", kind=kind)
  sql, _ = table.to_sql()
  assert sql.startswith(prefix + " (\n\t")


def test_if_not_exists_follows_table_name():
  table = _table([TableField(FieldOptions(name="b"), Boolean())], name="x", if_not_exists=True)
  sql, _ = table.to_sql()
  assert sql.startswith("CREATE x IF NOT EXISTS (\n\t")


def test_field_order_is_preserved():
  names = ["c", "a", "b"]
  table = _table([TableField(FieldOptions(name=n), Text()) for n in names])
  sql, _ = table.to_sql()
  assert sql == "CREATE t (\n\tc TEXT ,\n\ta TEXT ,\n\tb TEXT \n)"


def test_fields_are_stored_as_tuple():
  fields = [TableField(FieldOptions(name="a"), Text())]
  table = _table(fields)
  fields.append(TableField(FieldOptions(name="b"), Text()))
  assert isinstance(table.fields, tuple)
  assert len(table.fields) == 1


def test_sink_failure_in_field_aborts_table_render(posts_table):
  # Writes: CREATE, kind, space, name, IF NOT EXISTS, " (\n\t", then the
  # first field starts. Fail on the second write of the first field.
  sink = FailingSink(fail_on_write=8)

  with pytest.raises(SinkWriteError) as excinfo:
    posts_table.write_sql(sink)

  assert isinstance(excinfo.value.__cause__, OSError)
  # Partial output stays in the sink; nothing after the failure is written.
  assert sink.getvalue() == b"CREATE GLOBAL posts IF NOT EXISTS (\n\tid"
  assert sink.writes == 8


def test_sink_failure_on_first_write():
  table = _table([TableField(FieldOptions(name="a"), Text())])
  sink = FailingSink(fail_on_write=1)
  with pytest.raises(SinkWriteError):
    table.write_sql(sink)
  assert sink.getvalue() == b""


def test_render_logs_debug_summary(posts_table, caplog):
  caplog.set_level(logging.DEBUG, logger="ross.table.definition")
  posts_table.to_sql()
  assert any("posts" in r.getMessage() and "4 fields" in r.getMessage() for r in caplog.records)
