# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Configuration loading for segver.

This module loads YAML configuration that names version patterns and
default selection options:

  - Built-in defaults (the simple and semver patterns)
  - A project file (segver.yaml), explicit or found upward from the cwd

The loader performs deep merging where dicts are merged recursively and
lists/scalars are replaced (last wins).

Public API:

- load_effective_config: Load and merge configuration
- resolve_pattern: Look up or compile a pattern

Example:
    Basic usage:

        from segver.config import load_effective_config, resolve_pattern

        config = load_effective_config()
        pattern = resolve_pattern("semver", config)

"""

from .loader import BUILTIN_CONFIG, load_effective_config, resolve_pattern

__all__ = ["BUILTIN_CONFIG", "load_effective_config", "resolve_pattern"]
