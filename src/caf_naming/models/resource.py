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

import re

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator, model_validator

from caf_naming.exceptions import InvalidPatternError


def _unquote_pattern(value: str) -> str:
    """Unwrap a validation pattern stored as a quoted, escaped string literal.

    Only a value wrapped in double quotes is touched; anything else is already
    a plain pattern and is returned unchanged.
    """
    if len(value) < 2 or not (value.startswith('"') and value.endswith('"')):
        return value
    value = value[1:-1]
    value = value.replace('\\"', '"')
    return value.replace("\\\\", "\\")


class ResourceDefinition(BaseModel):
    """Naming constraints for a single resource type.

    Field names follow the keys of the resource definition catalog, so a
    catalog entry validates directly into this model.

    Args:
        name: Canonical resource type identifier, e.g. ``azurerm_storage_account``.
        alias: Optional short identifier resolving to the same definition.
        slug: Short tag inserted into generated names, e.g. ``st``.
        min_length: Minimum length of a generated name (inclusive).
        max_length: Maximum length of a generated name (inclusive).
        lowercase: Whether generated names are folded to lowercase.
        regex: Clean pattern; every match is removed from candidate strings.
        validation_regex: Pattern the final name must fully match.
        dashes: Whether the resource type accepts dashes (informational).
        scope: Scope in which the name must be unique (informational).
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(min_length=1)
    alias: str = ""
    slug: str = ""
    min_length: int = Field(default=0, ge=0)
    max_length: int = Field(ge=0)
    lowercase: bool = False
    regex: str = ""
    validation_regex: str = ""
    dashes: bool = False
    scope: str = ""

    _clean_re: re.Pattern[str] | None = PrivateAttr(default=None)
    _accept_re: re.Pattern[str] | None = PrivateAttr(default=None)

    @field_validator("validation_regex", mode="before")
    @classmethod
    def _strip_quotes(cls, v: str | None) -> str:
        return _unquote_pattern(v) if v else ""

    @field_validator("alias", "slug", "scope", "regex", mode="before")
    @classmethod
    def _none_as_empty(cls, v: str | None) -> str:
        return v or ""

    @model_validator(mode="after")
    def _check_bounds(self) -> ResourceDefinition:
        if self.min_length > self.max_length:
            raise ValueError(
                f"min_length ({self.min_length}) is greater than max_length "
                f"({self.max_length}) for resource type {self.name}"
            )
        return self

    def _compile(self, pattern: str) -> re.Pattern[str] | None:
        if not pattern:
            return None
        try:
            return re.compile(pattern)
        except re.error as exc:
            raise InvalidPatternError(self.name, pattern, str(exc)) from exc

    @property
    def clean_pattern(self) -> re.Pattern[str] | None:
        """Compiled clean pattern, or ``None`` when the definition has none."""
        if self._clean_re is None and self.regex:
            self._clean_re = self._compile(self.regex)
        return self._clean_re

    @property
    def accept_pattern(self) -> re.Pattern[str] | None:
        """Compiled validation pattern, or ``None`` when the definition has none."""
        if self._accept_re is None and self.validation_regex:
            self._accept_re = self._compile(self.validation_regex)
        return self._accept_re

    def compile(self) -> ResourceDefinition:
        """Compile and cache both patterns, raising InvalidPatternError on failure."""
        _ = self.clean_pattern
        _ = self.accept_pattern
        return self
