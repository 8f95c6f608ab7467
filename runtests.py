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

import sys
from pathlib import Path

import pytest


def main():
  """Run pytest on core/tests."""
  root = Path(__file__).resolve().parent

  # Ensure core/ is on sys.path so 'ross' can be imported without installing
  core = root / "core"
  if str(core) not in sys.path:
    sys.path.insert(0, str(core))

  return pytest.main([str(root / "core" / "tests")])


if __name__ == "__main__":
  raise SystemExit(main())
