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

from importlib.resources import files
import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError
import yaml

from caf_naming.exceptions import CatalogError
from caf_naming.helpers.logger import setup_logger
from caf_naming.models.resource import ResourceDefinition

logger = setup_logger(__name__)

BUNDLED_CATALOG = "resource_definitions.json"


def _read_entries(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CatalogError(f"Cannot read resource definition catalog {path}: {exc}") from exc

    match path.suffix.lower():
        case ".json":
            try:
                return json.loads(text)
            except json.JSONDecodeError as exc:
                raise CatalogError(f"Malformed JSON in catalog {path}: {exc}") from exc
        case ".yaml" | ".yml":
            try:
                return yaml.safe_load(text)
            except yaml.YAMLError as exc:
                raise CatalogError(f"Malformed YAML in catalog {path}: {exc}") from exc
        case _:
            raise CatalogError(f"Unsupported catalog format: {path.suffix.lower()}")


def parse_definitions(entries: Any, *, source: str = "<memory>") -> list[ResourceDefinition]:
    """Validate raw catalog entries into resource definitions.

    Args:
        entries: A list of mappings using the catalog keys (``name``, ``slug``,
            ``min_length``, ``max_length``, ``lowercase``, ``regex``,
            ``validation_regex``, ``dashes``, ``scope`` and optionally ``alias``).
        source: Where the entries come from, used in error messages.

    Raises:
        CatalogError: If the entries are not a list or an entry is invalid.
    """
    if not isinstance(entries, list):
        raise CatalogError(f"Catalog {source} must contain a list of resource definitions")

    definitions: list[ResourceDefinition] = []
    for index, entry in enumerate(entries):
        try:
            definitions.append(ResourceDefinition.model_validate(entry))
        except ValidationError as exc:
            label = entry.get("name", f"#{index}") if isinstance(entry, dict) else f"#{index}"
            raise CatalogError(f"Invalid resource definition {label} in {source}: {exc}") from exc
    return definitions


def load_catalog(path: Path | str | None = None) -> list[ResourceDefinition]:
    """Load resource definitions from ``path``, or the bundled catalog when omitted."""
    if path is None:
        resource = files("caf_naming.data").joinpath(BUNDLED_CATALOG)
        source = f"bundled {BUNDLED_CATALOG}"
        try:
            entries = json.loads(resource.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise CatalogError(f"Cannot load {source}: {exc}") from exc
    else:
        path = Path(path).expanduser()
        source = str(path)
        entries = _read_entries(path)

    definitions = parse_definitions(entries, source=source)
    logger.debug(f"Loaded {len(definitions)} resource definitions from {source}")
    return definitions
