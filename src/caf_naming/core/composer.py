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

from collections import deque
from collections.abc import Sequence
from typing import Literal, get_args

NamePart = Literal["name", "slug", "random", "suffixes", "prefixes"]

NAME_PARTS: frozenset[str] = frozenset(get_args(NamePart))
DEFAULT_NAME_PRECEDENCE: tuple[NamePart, ...] = ("name", "slug", "random", "suffixes", "prefixes")


def compose_name(
    separator: str,
    prefixes: Sequence[str],
    name: str,
    slug: str,
    suffixes: Sequence[str],
    random_suffix: str,
    max_length: int,
    precedence: Sequence[str] = DEFAULT_NAME_PRECEDENCE,
) -> str:
    """Assemble name components by priority within a length budget.

    Components are admitted whole, in ``precedence`` order, while the joined
    result stays within ``max_length``; a component that does not fit is
    dropped and the next one is tried. ``slug`` and ``prefixes`` are placed in
    front of what was admitted so far, everything else behind it. All
    ``suffixes`` are tried first to last, all ``prefixes`` last to first, so
    both keep their relative order in the output.

    Example:
        >>> compose_name("-", ["a", "b"], "name", "slug", ["c", "d"], "rd", 19,
        ...              ["name", "random", "slug", "suffixes", "prefixes"])
        'b-slug-name-rd-c-d'

    Args:
        separator: Joins admitted components; counted once per boundary.
        prefixes: Components placed before the slug and name.
        name: Base name.
        slug: Resource type tag.
        suffixes: Components placed after the name and random part.
        random_suffix: Random component.
        max_length: Length budget for the joined result.
        precedence: Priority order of the component kinds.

    Returns:
        The joined components; an empty string when nothing was admitted.

    Raises:
        ValueError: If ``precedence`` contains an unknown component kind.
    """
    unknown = [part for part in precedence if part not in NAME_PARTS]
    if unknown:
        raise ValueError(
            f"Unknown name precedence entries {unknown}; expected any of {sorted(NAME_PARTS)}"
        )

    contents: deque[str] = deque()
    current_length = 0

    def admit(component: str, *, front: bool) -> None:
        nonlocal current_length
        if not component:
            return
        needed = len(component) + (len(separator) if contents else 0)
        if current_length + needed > max_length:
            return
        if front:
            contents.appendleft(component)
        else:
            contents.append(component)
        current_length += needed

    pending_suffixes = deque(suffixes)
    pending_prefixes = deque(prefixes)

    for part in precedence:
        match part:
            case "name":
                admit(name, front=False)
            case "slug":
                admit(slug, front=True)
            case "random":
                admit(random_suffix, front=False)
            case "suffixes":
                while pending_suffixes:
                    admit(pending_suffixes.popleft(), front=False)
            case "prefixes":
                while pending_prefixes:
                    admit(pending_prefixes.pop(), front=True)

    return separator.join(contents)
