# Copyright 2025 iGenius S.p.A
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

from .cleaning import clean_slice, clean_string, matches
from .composer import DEFAULT_NAME_PRECEDENCE, NamePart, compose_name
from .environment import read_environment_variable
from .naming import check_name, resolve_name, resolve_names, validate_resource_types
from .randomness import random_suffix, resolve_seed
from .registry import (
    ResourceRegistry,
    build_registry,
    get_registry,
    load_registry,
    reload_registry_cache,
)

__all__ = [
    "DEFAULT_NAME_PRECEDENCE",
    "NamePart",
    "ResourceRegistry",
    "build_registry",
    "check_name",
    "clean_slice",
    "clean_string",
    "compose_name",
    "get_registry",
    "load_registry",
    "matches",
    "random_suffix",
    "read_environment_variable",
    "reload_registry_cache",
    "resolve_name",
    "resolve_names",
    "resolve_seed",
    "validate_resource_types",
]
