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
from enum import Enum
from typing import List, Optional

from ross.config import profiles
from ross.utils.env import env_str

"""
SQL dialect tags.

A dialect is only a tag threaded through every write_sql() call. There is
no translation between dialects; PostgreSQL is the single target.

get_active_dialect() is an opt-in helper for callers that want the tag
from env vars or a profile. Rendering never calls it: write_sql() and
to_sql() only use the tag they are given, and read no env or files.
"""

log = logging.getLogger(__name__)


class Dialect(str, Enum):
  POSTGRES = "postgres"


# Registry of known dialects, keyed by lowercase name.
_DIALECT_REGISTRY: dict[str, Dialect] = {
  d.value: d for d in Dialect
}

DEFAULT_DIALECT = Dialect.POSTGRES


def get_available_dialect_names() -> List[str]:
  return sorted(_DIALECT_REGISTRY)


def _resolve_dialect_name(explicit: Optional[str] = None) -> str:
  """
  Resolve a dialect name from (in order):

  1. explicit argument
  2. environment variables (ROSS_SQL_DIALECT, ROSS_DIALECT)
  3. active profile.default_dialect
  4. hard fallback 'postgres'
  """
  # 1) Explicit argument
  if explicit:
    return explicit.lower()

  # 2) Env overrides
  env_name = env_str("ROSS_SQL_DIALECT") or env_str("ROSS_DIALECT")
  if env_name:
    return env_name.lower()

  # 3) Profile.default_dialect
  try:
    profile = profiles.load_profile()
    if profile.default_dialect:
      return profile.default_dialect.lower()
  except (FileNotFoundError, KeyError, ValueError) as exc:
    log.debug("No usable profile for dialect resolution: %s", exc)

  # 4) Hard fallback
  return DEFAULT_DIALECT.value


def get_active_dialect(name: Optional[str] = None) -> Dialect:
  """
  Return the active Dialect tag.

  Resolution order:
    - `name` argument (if provided)
    - ROSS_SQL_DIALECT / ROSS_DIALECT env vars
    - active profile's `default_dialect`
    - hard fallback 'postgres'

  Raises:
      ValueError: if the resolved name is not registered.
  """
  dialect_name = _resolve_dialect_name(name)

  try:
    return _DIALECT_REGISTRY[dialect_name]
  except KeyError as exc:
    available = ", ".join(get_available_dialect_names())
    raise ValueError(
      f"Unknown SQL dialect: {dialect_name!r}. "
      f"Available dialects: {available}."
    ) from exc
