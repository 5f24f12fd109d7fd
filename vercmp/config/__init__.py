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

"""Configuration for vercmp.

Public API:

- Manifest: Parse settings (max_depth, ignore_text) applied after parsing
- CompareConfig: Effective settings (parser name + manifest)
- load_config: Merge defaults, a YAML file and overrides into a CompareConfig

Example:
    Basic usage:

        from pathlib import Path
        from vercmp import compare
        from vercmp.config import load_config

        cfg = load_config(Path("vercmp.yaml"))
        compare("1.2.3", "1.2.4", parser=cfg.parser, manifest=cfg.manifest)

"""

from .loader import DEFAULT_CONFIG, CompareConfig, load_config
from .manifest import Manifest

__all__ = ["DEFAULT_CONFIG", "CompareConfig", "Manifest", "load_config"]
