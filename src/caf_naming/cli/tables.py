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

from collections.abc import Iterable

from rich.table import Table
from rich.text import Text

from caf_naming.models.resource import ResourceDefinition
from caf_naming.models.result import NameResult


def _kv_table() -> Table:
    """Create a key-value table with grid layout for displaying field-value pairs.

    The table has two columns: a right-justified "Field" column with bold dim
    styling and no wrapping, and a "Value" column that allows text overflow
    folding.
    """
    t = Table.grid(padding=(0, 1))
    t.add_column("Field", style="bold dim", no_wrap=True, justify="right")
    t.add_column("Value", overflow="fold")
    return t


def _flag(value: bool) -> Text:
    return Text("yes", style="green") if value else Text("no", style="dim")


def definitions_table(definitions: Iterable[ResourceDefinition]) -> Table:
    """One row per resource type: slug, length bounds, casing and dashes."""
    t = Table(title="Resource types", header_style="bold", show_lines=False)
    t.add_column("Type", style="bold cyan", no_wrap=True)
    t.add_column("Slug", style="magenta")
    t.add_column("Length", justify="right")
    t.add_column("Lowercase", justify="center")
    t.add_column("Dashes", justify="center")
    t.add_column("Scope", style="dim")
    for d in definitions:
        t.add_row(
            d.name,
            d.slug or "-",
            f"{d.min_length}-{d.max_length}",
            _flag(d.lowercase),
            _flag(d.dashes),
            d.scope or "-",
        )
    return t


def definition_table(definition: ResourceDefinition) -> Table:
    t = _kv_table()
    t.add_row("Type", Text(definition.name, style="bold cyan"))
    if definition.alias:
        t.add_row("Alias", Text(definition.alias))
    t.add_row("Slug", definition.slug or "-")
    t.add_row("Length", f"{definition.min_length}-{definition.max_length}")
    t.add_row("Lowercase", _flag(definition.lowercase))
    t.add_row("Dashes", _flag(definition.dashes))
    t.add_row("Clean regex", Text(definition.regex or "-"))
    t.add_row("Validation regex", Text(definition.validation_regex or "-"))
    t.add_row("Scope", definition.scope or "-")
    return t


def results_table(outcome: NameResult) -> Table:
    t = Table(header_style="bold")
    t.add_column("Type", style="bold cyan", no_wrap=True)
    t.add_column("Name", overflow="fold")
    t.add_column("Length", justify="right", style="dim")
    for rtype, name in outcome.results.items():
        t.add_row(rtype, Text(name), str(len(name)))
    return t
