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

import io
from pathlib import Path

from pydantic import BaseModel, Field, field_validator
import yaml

from caf_naming.config.defaults import default_for
from caf_naming.core.composer import DEFAULT_NAME_PRECEDENCE
from caf_naming.core.naming import resolve_names
from caf_naming.core.randomness import random_suffix, resolve_seed
from caf_naming.core.registry import ResourceRegistry, get_registry
from caf_naming.models.result import NameResult


class NameRequest(BaseModel):
    """Declarative name request, one field per provider argument.

    Defaults for the formatting options can be overridden in ``defaults.yaml``
    under the ``request`` key, e.g.::

        request:
          separator: ""
          random_length: 5
    """

    name: str = ""
    resource_type: str = ""
    resource_types: list[str] = Field(default_factory=list)
    prefixes: list[str] = Field(default_factory=list)
    suffixes: list[str] = Field(default_factory=list)

    separator: str = Field(default_factory=default_for("request.separator", "-"))
    random_length: int = Field(
        default_factory=default_for("request.random_length", 0),
        ge=0,
        description="Length of the generated random component",
    )
    random_seed: int = Field(
        default=0,
        description="Seed of the random component; 0 picks a time-derived seed",
    )
    random_string: str = Field(
        default="",
        description="Explicit random component, overrides random_length/random_seed",
    )
    clean_input: bool = Field(default_factory=default_for("request.clean_input", True))
    passthrough: bool = Field(default_factory=default_for("request.passthrough", False))
    use_slug: bool = Field(default_factory=default_for("request.use_slug", True))

    @field_validator("prefixes", "suffixes", "resource_types", mode="before")
    @classmethod
    def _none_as_empty_list(cls, v: list[str] | None) -> list[str]:
        return v or []

    @field_validator("name", "resource_type", "random_string", mode="before")
    @classmethod
    def _none_as_empty_str(cls, v: str | None) -> str:
        return v or ""

    def resolve(self, registry: ResourceRegistry | None = None) -> NameResult:
        """Resolve the request with the fixed default precedence.

        Args:
            registry: Registry to resolve against; the cached process-wide one
                when omitted.
        """
        if registry is None:
            registry = get_registry()
        # the reported seed stays 0 unless it drew the random part
        seed = 0
        random_part = self.random_string
        if not random_part and self.random_length > 0:
            seed = resolve_seed(self.random_seed)
            random_part = random_suffix(self.random_length, seed)

        outcome = resolve_names(
            registry,
            resource_type=self.resource_type,
            resource_types=self.resource_types,
            separator=self.separator,
            prefixes=self.prefixes,
            name=self.name,
            suffixes=self.suffixes,
            random_suffix=random_part,
            clean_input=self.clean_input,
            passthrough=self.passthrough,
            use_slug=self.use_slug,
            precedence=DEFAULT_NAME_PRECEDENCE,
        )
        outcome.random_seed = seed
        outcome.random_string = random_part
        return outcome

    @classmethod
    def read(cls, path: str | Path) -> NameRequest:
        with Path(path).expanduser().open() as f:
            return _load_name_request(f)


def _load_name_request(request_file: io.TextIOBase) -> NameRequest:
    """Load a YAML mapping of request fields."""
    data = yaml.safe_load(request_file) or {}
    if not isinstance(data, dict):
        raise ValueError("A name request file must contain a mapping of fields")
    return NameRequest.model_validate(data)
