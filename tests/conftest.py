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

import pytest

from caf_naming.core.registry import ResourceRegistry, build_registry
from caf_naming.models.resource import ResourceDefinition


@pytest.fixture(autouse=True)
def clear_caches_between_tests(monkeypatch):
    from caf_naming.config.defaults import reload_defaults_cache
    from caf_naming.config.settings import reload_settings_cache
    from caf_naming.core.registry import reload_registry_cache

    monkeypatch.delenv("CAF_NAMING_CATALOG_FILE", raising=False)
    monkeypatch.delenv("CAF_NAMING_DEFAULTS", raising=False)

    # before each test
    reload_settings_cache()
    reload_defaults_cache()
    reload_registry_cache()
    yield
    # after each test
    reload_settings_cache()
    reload_defaults_cache()
    reload_registry_cache()


@pytest.fixture
def no_defaults_file(mocker, tmp_path):
    """Point the defaults lookup at an empty directory."""
    from types import SimpleNamespace

    import caf_naming.config.defaults as defaults

    mocker.patch.object(
        defaults, "get_settings", return_value=SimpleNamespace(defaults_file=None)
    )
    mocker.patch.object(defaults, "_DEFAULT_FILES", [lambda: tmp_path / "missing.yaml"])
    defaults.reload_defaults_cache()


@pytest.fixture
def lowercase_alnum() -> ResourceDefinition:
    return ResourceDefinition(
        name="test_lower_alnum",
        slug="tla",
        min_length=3,
        max_length=24,
        lowercase=True,
        regex="[^0-9A-Za-z]",
        validation_regex="^[a-z0-9]{3,24}$",
        dashes=False,
    )


@pytest.fixture
def dashed() -> ResourceDefinition:
    return ResourceDefinition(
        name="test_dashed",
        alias="Test/dashed",
        slug="td",
        min_length=1,
        max_length=40,
        regex="[^0-9A-Za-z-]",
        validation_regex="^[a-zA-Z0-9-]{1,40}$",
        dashes=True,
    )


@pytest.fixture
def registry(lowercase_alnum, dashed) -> ResourceRegistry:
    """A small registry, independent from the bundled catalog."""
    return build_registry([lowercase_alnum, dashed])
