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

from caf_naming.core.composer import DEFAULT_NAME_PRECEDENCE, compose_name

PRECEDENCE = ["name", "random", "slug", "suffixes", "prefixes"]


def _compose(max_length: int, precedence=PRECEDENCE, **overrides) -> str:
    params = dict(
        separator="-",
        prefixes=["a", "b"],
        name="name",
        slug="slug",
        suffixes=["c", "d"],
        random_suffix="rd",
    )
    params.update(overrides)
    return compose_name(max_length=max_length, precedence=precedence, **params)


def test_compose_keeps_component_order_when_everything_fits():
    assert _compose(100) == "a-b-slug-name-rd-c-d"


@pytest.mark.parametrize(
    "max_length, expected",
    [
        (19, "b-slug-name-rd-c-d"),
        (15, "slug-name-rd-c"),
        (4, "name"),
        (3, "rd"),
    ],
)
def test_compose_drops_lowest_priority_components_first(max_length, expected):
    assert _compose(max_length) == expected


@pytest.mark.parametrize("max_length", range(0, 25))
def test_compose_never_exceeds_budget(max_length):
    assert len(_compose(max_length)) <= max_length


def test_compose_all_empty_returns_empty_string():
    assert (
        compose_name("-", [], "", "", [], "", 50, DEFAULT_NAME_PRECEDENCE) == ""
    )


def test_compose_skips_empty_components_without_spending_separator():
    out = _compose(100, prefixes=["", "b"], suffixes=["c", ""], random_suffix="")
    assert out == "b-slug-name-c"


def test_compose_dropped_suffix_does_not_block_later_ones():
    # "long" no longer fits after name-rd, the shorter "x" still does
    out = _compose(
        11,
        precedence=["name", "random", "suffixes"],
        suffixes=["long", "x"],
    )
    assert out == "name-rd-x"


def test_compose_default_precedence_favours_slug_over_random():
    out = compose_name("-", ["dev"], "app", "rg", ["001"], "xyz", 9, DEFAULT_NAME_PRECEDENCE)
    assert out == "rg-app"
    out = compose_name("-", ["dev"], "app", "rg", ["001"], "xyz", 10, DEFAULT_NAME_PRECEDENCE)
    assert out == "rg-app-xyz"


def test_compose_separator_length_counts_towards_budget():
    assert compose_name("--", [], "ab", "cd", [], "", 6, ["name", "slug"]) == "cd--ab"
    assert compose_name("--", [], "ab", "cd", [], "", 5, ["name", "slug"]) == "ab"


def test_compose_empty_separator_concatenates():
    assert compose_name("", ["dev"], "app", "st", [], "xyz", 24, DEFAULT_NAME_PRECEDENCE) == (
        "devstappxyz"
    )


def test_compose_does_not_mutate_caller_lists():
    prefixes = ["a", "b"]
    suffixes = ["c", "d"]
    _compose(100, prefixes=prefixes, suffixes=suffixes)
    assert prefixes == ["a", "b"]
    assert suffixes == ["c", "d"]


def test_compose_tag_missing_from_precedence_is_left_out():
    assert _compose(100, precedence=["name", "suffixes"]) == "name-c-d"


def test_compose_rejects_unknown_precedence_entries():
    with pytest.raises(ValueError, match="Unknown name precedence"):
        _compose(100, precedence=["name", "environment"])
