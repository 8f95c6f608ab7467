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
from pathlib import Path
from typing import Optional

import yaml

from ross.utils.env import env_str

"""
Profile loading for ross.

Profiles define environment-specific configuration. Today that is only
the default SQL dialect used when rendering table definitions.
"""

PROFILES_FILE_NAME = "ross_profiles.yaml"


@dataclass
class Profile:
  name: str

  # Dialect used for SQL rendering (unless env override)
  default_dialect: str


def _find_profiles_path(explicit_path: str | None = None) -> Path:
  """
  Locate ross_profiles.yaml in several common locations:

  1. explicit_path argument (if provided and exists)
  2. ROSS_PROFILES_PATH env var (if set and exists)
  3. common fallback locations relative to the CWD and /etc

  Raises:
      FileNotFoundError: if no suitable file can be found.
  """
  candidates: list[Path] = []

  # 1) explicit argument
  if explicit_path:
    candidates.append(Path(explicit_path))

  # 2) env var
  env_path = env_str("ROSS_PROFILES_PATH")
  if env_path:
    candidates.append(Path(env_path))

  # 3) fallbacks
  candidates += [
    Path.cwd() / "config" / PROFILES_FILE_NAME,
    Path("/etc/ross") / PROFILES_FILE_NAME,
  ]

  for c in candidates:
    if c.exists():
      return c

  raise FileNotFoundError(
    f"{PROFILES_FILE_NAME} not found in expected locations. "
    "Provide an explicit path or configure ROSS_PROFILES_PATH."
  )


def load_profile(profiles_path: Optional[str] = None) -> Profile:
  """
  Load and return the current active profile.

  Resolution order:
    - ROSS_PROFILE env var
    - `active_profile` key in ross_profiles.yaml
    - default 'dev'
  """
  path = _find_profiles_path(profiles_path)

  with open(path, "r", encoding="utf-8") as f:
    try:
      data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
      raise ValueError(f"Invalid YAML in {path}: {exc}") from exc

  active = env_str("ROSS_PROFILE", data.get("active_profile", "dev"))
  profiles = data.get("profiles") or {}

  if active not in profiles:
    available = ", ".join(sorted(profiles)) if profiles else "(none)"
    raise KeyError(
      f"Active profile '{active}' not found in {PROFILES_FILE_NAME} "
      f"at {path}. Available profiles: {available}."
    )

  p = profiles[active] or {}

  return Profile(
    name=active,
    default_dialect=p.get("default_dialect", "postgres"),
  )
