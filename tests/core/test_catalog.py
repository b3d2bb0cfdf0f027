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

import json

import pytest

from caf_naming.core.catalog import load_catalog, parse_definitions
from caf_naming.exceptions import CatalogError

ENTRY = {
    "name": "azurerm_storage_account",
    "slug": "st",
    "min_length": 3,
    "max_length": 24,
    "lowercase": True,
    "regex": "[^0-9A-Za-z]",
    "validation_regex": '"^[a-z0-9]{3,24}$"',
    "dashes": False,
    "scope": "global",
}


def test_load_catalog_json(tmp_path):
    path = tmp_path / "resourceDefinition.json"
    path.write_text(json.dumps([ENTRY]))
    [definition] = load_catalog(path)
    assert definition.name == "azurerm_storage_account"
    assert definition.validation_regex == "^[a-z0-9]{3,24}$"


def test_load_catalog_yaml(tmp_path):
    path = tmp_path / "catalog.yml"
    path.write_text(
        "- name: azurerm_key_vault\n"
        "  slug: kv\n"
        "  min_length: 3\n"
        "  max_length: 24\n"
        "  validation_regex: '^[a-zA-Z][a-zA-Z0-9-]{1,22}[a-zA-Z0-9]$'\n"
    )
    [definition] = load_catalog(str(path))
    assert definition.slug == "kv"


def test_load_catalog_bundled_by_default():
    names = [d.name for d in load_catalog()]
    assert "azurerm_storage_account" in names
    assert len(names) == len(set(names))


def test_load_catalog_missing_file(tmp_path):
    with pytest.raises(CatalogError, match="Cannot read"):
        load_catalog(tmp_path / "nope.json")


def test_load_catalog_unsupported_extension(tmp_path):
    path = tmp_path / "catalog.toml"
    path.write_text("")
    with pytest.raises(CatalogError, match="Unsupported catalog format"):
        load_catalog(path)


def test_load_catalog_malformed_json(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text("[{")
    with pytest.raises(CatalogError, match="Malformed JSON"):
        load_catalog(path)


def test_parse_definitions_requires_a_list():
    with pytest.raises(CatalogError, match="must contain a list"):
        parse_definitions({"name": "x"})


def test_parse_definitions_names_the_invalid_entry():
    with pytest.raises(CatalogError, match="broken_type"):
        parse_definitions([ENTRY, {"name": "broken_type", "min_length": 5, "max_length": 1}])


def test_parse_definitions_indexes_entries_without_name():
    with pytest.raises(CatalogError, match="#1"):
        parse_definitions([ENTRY, {"max_length": 1}])
