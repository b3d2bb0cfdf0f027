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

from importlib.metadata import PackageNotFoundError, version
from typing import TYPE_CHECKING

try:
    __version__ = version("caf-naming")
except PackageNotFoundError:  # during dev
    __version__ = "0.0.0"

__all__ = [
    "NameRequest",
    "NameResult",
    "ResourceDefinition",
    "ResourceRegistry",
    "check_name",
    "compose_name",
    "get_registry",
    "load_registry",
    "random_suffix",
    "resolve_name",
    "resolve_names",
    "validate_resource_types",
]


def __getattr__(name: str):
    if name == "NameRequest":
        from .config.request import NameRequest

        return NameRequest
    if name in {"NameResult", "ResourceDefinition"}:
        from . import models

        return getattr(models, name)
    if name in __all__:
        from . import core

        return getattr(core, name)
    raise AttributeError(name)


if TYPE_CHECKING:
    from .config.request import NameRequest
    from .core import (
        ResourceRegistry,
        check_name,
        compose_name,
        get_registry,
        load_registry,
        random_suffix,
        resolve_name,
        resolve_names,
        validate_resource_types,
    )
    from .models import NameResult, ResourceDefinition
