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

from rich.console import Console
from rich.style import Style
from rich.table import Table

from caf_naming.cli import tables as T
from caf_naming.models.result import NameResult


def _style_equals(style_obj, expected: str) -> bool:
    """Normalize style comparisons (Rich may store as str or Style)."""
    if style_obj is None:
        return expected == ""
    return Style.parse(str(style_obj)) == Style.parse(expected)


def _render(table: Table) -> str:
    console = Console(width=120)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def test_kv_table_structure():
    tbl = T._kv_table()
    assert isinstance(tbl, Table)
    assert len(tbl.columns) == 2

    field_col, value_col = tbl.columns
    assert field_col.header == "Field"
    assert _style_equals(field_col.style, "bold dim")
    assert field_col.no_wrap is True
    assert field_col.justify == "right"

    assert value_col.header == "Value"
    assert str(value_col.overflow) == "fold"


def test_definitions_table_rows(lowercase_alnum, dashed):
    tbl = T.definitions_table([lowercase_alnum, dashed])
    assert tbl.title == "Resource types"
    assert [c.header for c in tbl.columns] == [
        "Type",
        "Slug",
        "Length",
        "Lowercase",
        "Dashes",
        "Scope",
    ]
    assert tbl.row_count == 2

    out = _render(tbl)
    assert "test_lower_alnum" in out
    assert "3-24" in out
    assert "1-40" in out


def test_definitions_table_empty():
    tbl = T.definitions_table([])
    assert tbl.row_count == 0


def test_definition_table_keeps_regex_brackets(dashed):
    out = _render(T.definition_table(dashed))
    assert "Test/dashed" in out
    assert "[^0-9A-Za-z-]" in out
    assert "^[a-zA-Z0-9-]{1,40}$" in out


def test_definition_table_omits_missing_alias(lowercase_alnum):
    tbl = T.definition_table(lowercase_alnum)
    out = _render(tbl)
    assert "Alias" not in out
    assert "tla" in out


def test_results_table_lists_each_type():
    outcome = NameResult(results={"kv": "kv-app", "st": "stapp"})
    tbl = T.results_table(outcome)
    assert tbl.row_count == 2
    out = _render(tbl)
    assert "kv-app" in out
    assert "stapp" in out
