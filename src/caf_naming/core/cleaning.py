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

from collections.abc import Sequence

from caf_naming.models.resource import ResourceDefinition


def clean_string(value: str, definition: ResourceDefinition | None) -> str:
    """Remove every character the resource type does not allow.

    The definition's ``regex`` matches what must be deleted. Empty input and a
    missing definition are returned unchanged, as is input for a definition
    with no clean pattern.

    Raises:
        InvalidPatternError: If the clean pattern does not compile.
    """
    if not value or definition is None:
        return value
    pattern = definition.clean_pattern
    if pattern is None:
        return value
    return pattern.sub("", value)


def clean_slice(values: Sequence[str], definition: ResourceDefinition | None) -> list[str]:
    """Clean each element, keeping order and length (elements may become empty)."""
    return [clean_string(v, definition) for v in values]


def matches(candidate: str, definition: ResourceDefinition) -> bool:
    """Whether ``candidate`` fully matches the definition's validation pattern.

    A definition without a validation pattern accepts nothing.
    """
    pattern = definition.accept_pattern
    if pattern is None:
        return False
    return pattern.fullmatch(candidate) is not None
