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

from caf_naming.core.cleaning import clean_slice, clean_string, matches
from caf_naming.core.composer import DEFAULT_NAME_PRECEDENCE, compose_name
from caf_naming.core.registry import ResourceRegistry
from caf_naming.exceptions import (
    EmptyTypeSelectionError,
    ResourceTypeNotFoundError,
    ValidationFailedError,
)
from caf_naming.helpers.logger import setup_logger
from caf_naming.models.result import NameResult

logger = setup_logger(__name__)


def resolve_name(
    registry: ResourceRegistry,
    resource_type: str,
    separator: str = "-",
    prefixes: Sequence[str] = (),
    name: str = "",
    suffixes: Sequence[str] = (),
    random_suffix: str = "",
    clean_input: bool = True,
    passthrough: bool = False,
    use_slug: bool = True,
    precedence: Sequence[str] = DEFAULT_NAME_PRECEDENCE,
) -> str:
    """Generate a name for ``resource_type`` that satisfies its constraints.

    The inputs are optionally cleaned with the type's clean pattern, composed
    within the type's ``max_length`` (or taken verbatim in passthrough mode),
    trimmed, lowercased when the type requires it, and finally checked against
    the type's validation pattern.

    Args:
        registry: Resource definitions to resolve ``resource_type`` against.
        resource_type: Type name or alias.
        separator: Joins the name components.
        prefixes: Components placed in front of the name.
        name: Base name.
        suffixes: Components placed after the name.
        random_suffix: Random component, usually from ``random_suffix()``.
        clean_input: Strip characters the type does not allow from every input.
        passthrough: Use ``name`` as is instead of composing it.
        use_slug: Include the type's slug (ignored in passthrough mode).
        precedence: Priority order of the components for the length budget.

    Returns:
        The validated name.

    Raises:
        ResourceTypeNotFoundError: If the type is unknown.
        InvalidPatternError: If one of the type's patterns does not compile.
        ValidationFailedError: If the result does not match the validation pattern.
    """
    definition = registry.lookup(resource_type)
    definition.compile()

    slug = definition.slug if use_slug and not passthrough else ""

    if clean_input:
        prefixes = clean_slice(prefixes, definition)
        suffixes = clean_slice(suffixes, definition)
        name = clean_string(name, definition)
        separator = clean_string(separator, definition)
        random_suffix = clean_string(random_suffix, definition)

    logger.debug(
        f"{resource_type}: prefixes={list(prefixes)} name={name!r} slug={slug!r} "
        f"random={random_suffix!r} suffixes={list(suffixes)} passthrough={passthrough}"
    )

    if passthrough:
        candidate = name
    else:
        candidate = compose_name(
            separator,
            prefixes,
            name,
            slug,
            suffixes,
            random_suffix,
            definition.max_length,
            precedence,
        )

    candidate = candidate[: definition.max_length]
    if definition.lowercase:
        candidate = candidate.lower()

    if not matches(candidate, definition):
        raise ValidationFailedError(resource_type, candidate, definition.validation_regex)

    logger.debug(f"{resource_type}: resolved {candidate!r}")
    return candidate


def validate_resource_types(
    registry: ResourceRegistry,
    resource_type: str = "",
    resource_types: Sequence[str] = (),
) -> None:
    """Check that every requested type exists, reporting all unknown ones at once.

    Raises:
        EmptyTypeSelectionError: If no type was requested at all.
        ResourceTypeNotFoundError: Listing every unknown identifier.
    """
    if not resource_type and not resource_types:
        raise EmptyTypeSelectionError()

    unknown: list[str] = []
    for candidate in [resource_type, *resource_types]:
        if candidate and candidate not in registry and candidate not in unknown:
            unknown.append(candidate)
    if unknown:
        raise ResourceTypeNotFoundError(unknown)


def resolve_names(
    registry: ResourceRegistry,
    resource_type: str = "",
    resource_types: Sequence[str] = (),
    separator: str = "-",
    prefixes: Sequence[str] = (),
    name: str = "",
    suffixes: Sequence[str] = (),
    random_suffix: str = "",
    clean_input: bool = True,
    passthrough: bool = False,
    use_slug: bool = True,
    precedence: Sequence[str] = DEFAULT_NAME_PRECEDENCE,
) -> NameResult:
    """Resolve the same inputs for a single type and a list of types.

    The single ``resource_type`` is resolved first, then ``resource_types`` in
    order. The first failing type aborts the whole call.
    """
    validate_resource_types(registry, resource_type, resource_types)

    outcome = NameResult(random_string=random_suffix)
    for rtype in [resource_type, *resource_types]:
        if not rtype:
            continue
        outcome.results[rtype] = resolve_name(
            registry,
            rtype,
            separator=separator,
            prefixes=prefixes,
            name=name,
            suffixes=suffixes,
            random_suffix=random_suffix,
            clean_input=clean_input,
            passthrough=passthrough,
            use_slug=use_slug,
            precedence=precedence,
        )
    if resource_type:
        outcome.result = outcome.results[resource_type]
    return outcome


def check_name(registry: ResourceRegistry, resource_type: str, name: str) -> str:
    """Validate an existing name against ``resource_type`` without modifying it.

    Returns:
        ``name`` unchanged.

    Raises:
        ResourceTypeNotFoundError: If the type is unknown.
        ValidationFailedError: If the name is too long or too short, not lowercase where
            required, or does not match the validation pattern.
    """
    definition = registry.lookup(resource_type)
    pattern = definition.validation_regex

    if len(name) > definition.max_length:
        raise ValidationFailedError(
            resource_type,
            name,
            pattern,
            reason=f"length {len(name)} exceeds maximum length {definition.max_length}",
        )
    if len(name) < definition.min_length:
        raise ValidationFailedError(
            resource_type,
            name,
            pattern,
            reason=f"length {len(name)} is below minimum length {definition.min_length}",
        )
    if definition.lowercase and name != name.lower():
        raise ValidationFailedError(resource_type, name, pattern, reason="name must be lowercase")
    if not matches(name, definition):
        raise ValidationFailedError(
            resource_type, name, pattern, reason=f"does not match pattern '{pattern}'"
        )
    return name
