#
#  Copyright (C) 2017-2025 Dremio Corporation
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.
#
import logging
from json import dump as jdump, dumps as jdumps
from pathlib import Path
from typing import Annotated, Any, List, Optional

from click import Choice
from rich import console, table, print as pp
from rich.markup import escape
from typer import Argument, BadParameter, Exit, Option, Typer
from yaml import YAMLError, dump, safe_load

from pluginutils import log
from pluginutils.config import settings
from pluginutils.errors import PluginUtilsError
from pluginutils.formdata import get_value, set_value
from pluginutils.inspection import LocalhostGuard, find_duplicates

ty = Typer(
    context_settings=dict(help_option_names=["-h", "--help"]),
    name="plugin-utils",
    help="Inspect and edit plugin form data and datasource configurations",
    no_args_is_help=True,
)


@ty.callback()
def main(
    config_file: Annotated[
        Optional[Path],
        Option("-c", "--cfg", help="The config yaml for various options"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        Option(
            help="The log level",
            click_type=Choice(list(logging.getLevelNamesMapping().keys())),
        ),
    ] = None,
    enable_json_logging: Annotated[
        Optional[bool], Option("--json-logs", help="Enable JSON logs")
    ] = None,
):
    if config_file is not None:
        settings.configure(config_file, force=True)
    s = settings.instance().with_overrides(
        {"log.level": log_level, "log.json_logs": enable_json_logging}
    )
    log.configure(
        enable_json_logging=bool(s.log.json_logs), to_file=bool(s.log.to_file)
    )
    log.set_level(s.log.level or "WARNING")


def _load_document(path: Path) -> Any:
    if not path.exists():
        raise BadParameter(f"File {path!s} not found")
    try:
        with path.open() as f:
            return safe_load(f)
    except YAMLError as e:
        raise BadParameter(f"File {path!s} is not valid yaml or json: {e}")


def _render(doc: Any, path: Optional[Path] = None) -> str:
    if path is not None and path.suffix == ".json":
        return jdumps(doc, indent=2)
    return dump(doc, sort_keys=False)


# --------------------------------------------------------------------------------
# form data

fd = Typer(
    context_settings=dict(help_option_names=["-h", "--help"]),
    name="formdata",
    help="Read and write values in plugin form data",
    no_args_is_help=True,
)


@fd.command("get", help="Print the value stored at a dot-delimited path")
def formdata_get(
    file: Annotated[Path, Argument(help="The form data yaml or json file")],
    field: Annotated[str, Argument(help="The path, e.g. parent.child.key")],
):
    doc = _load_document(file)
    try:
        value = get_value(doc, field)
    except PluginUtilsError as e:
        raise BadParameter(str(e))

    if value is None:
        pp(f"{escape(field)} is not configured")
        raise Exit(code=1)
    pp(escape(_render(value) if isinstance(value, (dict, list)) else str(value)))


@fd.command("set", help="Set the value at a dot-delimited path")
def formdata_set(
    file: Annotated[Path, Argument(help="The form data yaml or json file")],
    field: Annotated[str, Argument(help="The path, e.g. parent.child.key")],
    value: Annotated[str, Argument(help="The value, parsed as a yaml scalar")],
    dry_run: Annotated[
        bool, Option(help="Dry run, do not overwrite the file. Just print it")
    ] = False,
):
    doc = _load_document(file) if file.exists() else None
    try:
        doc = set_value(doc, field, safe_load(value))
    except PluginUtilsError as e:
        raise BadParameter(str(e))

    if dry_run:
        pp(escape(_render(doc, file)))
        return

    with file.open("w") as f:
        if file.suffix == ".json":
            jdump(doc, f, indent=2)
        else:
            dump(doc, f, sort_keys=False)
    pp(f"Updated {escape(field)} in {file!s}")


# --------------------------------------------------------------------------------
# datasources

ds = Typer(
    context_settings=dict(help_option_names=["-h", "--help"]),
    name="datasource",
    help="Validate datasource configurations",
    no_args_is_help=True,
)


@ds.command("hint", help="Show advisory hints for a datasource configuration")
def datasource_hint(
    file: Annotated[
        Path, Argument(help="The datasource configuration yaml or json file")
    ],
):
    hints = LocalhostGuard.from_settings().hint_for_localhost(_load_document(file))
    if not hints:
        pp("No hints")
        return
    for hint in sorted(hints):
        pp(f"[yellow]hint[/yellow]: {escape(hint)}")


# --------------------------------------------------------------------------------
# columns

cl = Typer(
    context_settings=dict(help_option_names=["-h", "--help"]),
    name="columns",
    help="Column name helpers",
    no_args_is_help=True,
)


@cl.command("duplicates", help="List column names that appear more than once")
def columns_duplicates(
    names: Annotated[List[str], Argument(help="Column names in result set order")],
):
    duplicates = find_duplicates(names)
    if not duplicates:
        pp("No duplicate columns")
        return

    tab = table.Table(
        table.Column("Column", justify="left", style="cyan"),
        "Occurrences",
        title="Duplicate columns",
    )
    for name in sorted(duplicates):
        tab.add_row(escape(name), str(names.count(name)))
    console.Console().print(tab)


# --------------------------------------------------------------------------------
# configuration

tc = Typer(
    context_settings=dict(help_option_names=["-h", "--help"]),
    name="config",
    help="Configuration management",
    no_args_is_help=True,
)


@tc.command("list", help="Show the current configuration")
def show_config(
    show_filename: Annotated[
        bool, Option(help="Show the filename for default config file")
    ] = False,
):
    dc = settings.default_config()
    pp(f"Default config file: {dc!s} (exists = {dc.exists()!s})")
    if not show_filename:
        pp(settings.write_settings(dry_run=True))
    pp(f"Default log file: {log.get_log_file()!s}")


@tc.command("create", help="Create a default configuration file")
def create_config(
    dry_run: Annotated[
        bool, Option(help="Dry run, do not overwrite the config file. Just print it")
    ] = False,
):
    if (d := settings.write_settings(dry_run=dry_run)) is not None and dry_run:
        pp(d)
    elif not dry_run:
        pp(f"Created default config file: {settings.default_config()!s}")


ty.add_typer(fd)
ty.add_typer(ds)
ty.add_typer(cl)
ty.add_typer(tc)


def cli():
    ty()


if __name__ == "__main__":
    cli()
