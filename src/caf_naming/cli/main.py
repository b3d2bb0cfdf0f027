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

import logging
from pathlib import Path
from typing import NoReturn, Optional

from rich.console import Console
from rich.markup import escape
import typer
from typing_extensions import Annotated

from ..config.request import NameRequest, _load_name_request
from ..core.environment import read_environment_variable
from ..core.naming import check_name
from ..core.registry import ResourceRegistry, get_registry, load_registry
from ..exceptions import CafNamingError
from ..helpers.logger import setup_logger
from ..utils.version import get_version
from .tables import definition_table, definitions_table, results_table

app = typer.Typer(name="caf-naming CLI", no_args_is_help=True)

console = Console()
err_console = Console(stderr=True)
logger = setup_logger("caf_naming.cli")


def _fail(exc: Exception) -> NoReturn:
    err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}", highlight=False)
    raise typer.Exit(code=1)


def _registry(ctx: typer.Context) -> ResourceRegistry:
    if isinstance(ctx.obj, ResourceRegistry):
        return ctx.obj
    return get_registry()


def _set_verbose() -> None:
    for name in list(logging.Logger.manager.loggerDict):
        if name == "caf_naming" or name.startswith("caf_naming."):
            logging.getLogger(name).setLevel(logging.DEBUG)


@app.callback()
def main_callback(
    ctx: typer.Context,
    catalog: Annotated[
        Optional[Path],
        typer.Option(
            "--catalog",
            help="Resource definition catalog (JSON or YAML) to use instead of the default one.",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log debug details to stderr.")
    ] = False,
):
    if verbose:
        _set_verbose()
    if catalog is not None:
        try:
            ctx.obj = load_registry(catalog)
        except CafNamingError as exc:
            _fail(exc)
        logger.debug(f"Using catalog {catalog} ({len(ctx.obj)} resource types)")


@app.command("version", short_help="Show the version of the caf-naming CLI")
def version(short: bool = False):
    v = get_version()
    print(v if short else f"caf-naming CLI Version: {v}")
    raise typer.Exit()


@app.command("name", short_help="Generate a name for one or more resource types")
def generate_name(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Base name.")] = "",
    resource_types: Annotated[
        Optional[list[str]],
        typer.Option(
            "--type",
            "-t",
            help="Resource type or alias. Repeat to generate names for several types.",
        ),
    ] = None,
    prefixes: Annotated[
        Optional[list[str]], typer.Option("--prefix", "-p", help="Prefix, repeatable, kept in order.")
    ] = None,
    suffixes: Annotated[
        Optional[list[str]], typer.Option("--suffix", "-s", help="Suffix, repeatable, kept in order.")
    ] = None,
    separator: Annotated[str, typer.Option("--separator", help="Component separator.")] = "-",
    random_length: Annotated[
        int, typer.Option("--random-length", min=0, help="Length of the random component.")
    ] = 0,
    random_seed: Annotated[
        int, typer.Option("--random-seed", help="Seed of the random component, 0 for a fresh one.")
    ] = 0,
    random_string: Annotated[
        str, typer.Option("--random-string", help="Explicit random component.")
    ] = "",
    clean_input: Annotated[
        bool,
        typer.Option("--clean/--no-clean", help="Strip characters the resource type forbids."),
    ] = True,
    passthrough: Annotated[
        bool,
        typer.Option("--passthrough", help="Use NAME as is, only trimming and validating it."),
    ] = False,
    use_slug: Annotated[
        bool, typer.Option("--slug/--no-slug", help="Include the resource type slug.")
    ] = True,
    as_json: Annotated[bool, typer.Option("--json", help="Print the full result as JSON.")] = False,
):
    """
    Generate a name for the given resource type(s).

    With a single --type only the name is printed, so the command can be used
    in shell substitutions.
    """
    resource_types = resource_types or []
    request = NameRequest(
        name=name,
        resource_type=resource_types[0] if resource_types else "",
        resource_types=resource_types[1:],
        prefixes=prefixes or [],
        suffixes=suffixes or [],
        separator=separator,
        random_length=random_length,
        random_seed=random_seed,
        random_string=random_string,
        clean_input=clean_input,
        passthrough=passthrough,
        use_slug=use_slug,
    )
    _print_outcome(request, _registry(ctx), as_json=as_json)


@app.command("resolve", short_help="Resolve a name request described in a YAML file")
def resolve_file(
    ctx: typer.Context,
    request_file: Annotated[
        typer.FileText,
        typer.Argument(help="Path to a YAML file with the name request fields"),
    ],
    as_json: Annotated[bool, typer.Option("--json", help="Print the full result as JSON.")] = False,
):
    try:
        request = _load_name_request(request_file)
    except ValueError as exc:
        _fail(exc)
    _print_outcome(request, _registry(ctx), as_json=as_json)


def _print_outcome(request: NameRequest, registry: ResourceRegistry, *, as_json: bool) -> None:
    try:
        outcome = request.resolve(registry)
    except CafNamingError as exc:
        _fail(exc)

    if as_json:
        payload = outcome.model_dump(mode="json")
        payload["id"] = outcome.id
        console.print_json(data=payload)
    elif len(outcome.results) == 1:
        print(next(iter(outcome.results.values())))
    else:
        console.print(results_table(outcome))


@app.command("check", short_help="Check an existing name against a resource type")
def check(
    ctx: typer.Context,
    resource_type: Annotated[str, typer.Argument(help="Resource type or alias.")],
    name: Annotated[str, typer.Argument(help="Name to validate.")],
):
    try:
        check_name(_registry(ctx), resource_type, name)
    except CafNamingError as exc:
        _fail(exc)
    typer.echo(f"✅ '{name}' is a valid {resource_type} name.")


@app.command("types", short_help="List the known resource types")
def list_types(
    ctx: typer.Context,
    filter_: Annotated[
        Optional[str],
        typer.Option("--filter", "-f", help="Only show types containing this text."),
    ] = None,
):
    registry = _registry(ctx)
    definitions = [d for d in registry if not filter_ or filter_ in d.name]
    if not definitions:
        typer.echo("No matching resource types.")
        raise typer.Exit()
    console.print(definitions_table(definitions))


@app.command("describe", short_help="Show the naming constraints of a resource type")
def describe(
    ctx: typer.Context,
    resource_type: Annotated[str, typer.Argument(help="Resource type or alias.")],
):
    try:
        definition = _registry(ctx).lookup(resource_type)
    except CafNamingError as exc:
        _fail(exc)
    console.print(definition_table(definition))


@app.command("env", short_help="Read an environment variable")
def env(
    name: Annotated[str, typer.Argument(help="Name of the environment variable.")],
    default: Annotated[
        Optional[str],
        typer.Option("--default", help="Value to use if the variable is not set."),
    ] = None,
    fails_if_empty: Annotated[
        bool,
        typer.Option("--fail-if-empty", help="Exit with an error if the variable is not set."),
    ] = False,
):
    try:
        print(read_environment_variable(name, default=default, fails_if_empty=fails_if_empty))
    except CafNamingError as exc:
        _fail(exc)


if __name__ == "__main__":
    app()
