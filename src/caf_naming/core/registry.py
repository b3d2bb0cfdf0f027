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

from __future__ import annotations

from collections.abc import Iterable, Iterator
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

from caf_naming.config.settings import get_settings
from caf_naming.core.catalog import load_catalog
from caf_naming.exceptions import CatalogError, ResourceTypeNotFoundError
from caf_naming.helpers.logger import setup_logger
from caf_naming.models.resource import ResourceDefinition

logger = setup_logger(__name__)


class ResourceRegistry:
    """Read-only lookup of resource definitions by type name or alias.

    Built once from a sequence of definitions; patterns are compiled at
    construction so a broken catalog fails early. Instances are never mutated
    afterwards and can be shared freely.
    """

    __slots__ = ("_definitions", "_aliases")

    def __init__(self, definitions: Iterable[ResourceDefinition]):
        by_name: dict[str, ResourceDefinition] = {}
        for definition in definitions:
            if definition.name in by_name:
                raise CatalogError(f"Duplicate resource type '{definition.name}' in catalog")
            by_name[definition.name] = definition.compile()

        aliases: dict[str, str] = {}
        # explicit aliases take precedence over slugs
        for attr in ("alias", "slug"):
            for definition in by_name.values():
                short = getattr(definition, attr)
                if not short or short in by_name:
                    continue
                if short in aliases:
                    logger.debug(
                        f"{attr} '{short}' of {definition.name} already resolves to "
                        f"{aliases[short]}; keeping the first registration"
                    )
                    continue
                aliases[short] = definition.name

        self._definitions = MappingProxyType(by_name)
        self._aliases = MappingProxyType(aliases)

    def lookup(self, resource_type: str) -> ResourceDefinition:
        """Return the definition for a type name or alias.

        Raises:
            ResourceTypeNotFoundError: If the identifier is unknown.
        """
        definition = self._definitions.get(resource_type)
        if definition is None:
            canonical = self._aliases.get(resource_type)
            if canonical is None:
                raise ResourceTypeNotFoundError(resource_type)
            definition = self._definitions[canonical]
        return definition

    @property
    def type_names(self) -> list[str]:
        return list(self._definitions)

    @property
    def aliases(self) -> dict[str, str]:
        return dict(self._aliases)

    def __contains__(self, resource_type: object) -> bool:
        return resource_type in self._definitions or resource_type in self._aliases

    def __iter__(self) -> Iterator[ResourceDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        return f"ResourceRegistry({len(self)} types, {len(self._aliases)} aliases)"


def build_registry(definitions: Iterable[ResourceDefinition]) -> ResourceRegistry:
    return ResourceRegistry(definitions)


def load_registry(path: Path | str | None = None) -> ResourceRegistry:
    """Build a registry from a catalog file.

    Without ``path`` the ``catalog_file`` setting is used, falling back to the
    bundled catalog.
    """
    if path is None:
        path = get_settings().catalog_file
    return build_registry(load_catalog(path))


@lru_cache(maxsize=1)
def get_registry() -> ResourceRegistry:
    """
    Cached process-wide registry, built on first use.
    Tests can call `reload_registry_cache()` to pick up a different catalog.
    """
    return load_registry()


def reload_registry_cache() -> None:
    get_registry.cache_clear()  # type: ignore[attr-defined]
