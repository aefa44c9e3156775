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

"""Configuration loading for dewey.

Settings live in a dewey.yaml file found by walking upward from the
working directory (or passed explicitly with --config). The file is merged
over built-in defaults and validated.

Public API:

- load_config: Load, merge and validate the effective configuration
- find_config: Locate dewey.yaml
- DEFAULT_CONFIG: Built-in defaults

Example:
    Basic usage:

        from dewey.config import load_config

        config = load_config()
        print(config["overflow"])  # "wrap"

"""

from .loader import CONFIG_FILENAME, DEFAULT_CONFIG, find_config, load_config

__all__ = ["CONFIG_FILENAME", "DEFAULT_CONFIG", "find_config", "load_config"]
