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

"""
Rendering package for table definitions.

Provides the shared write-to-sink capability, symbolic tokens, error types
and the dialect tag threaded through every render call.
"""
