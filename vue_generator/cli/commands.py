#!/usr/bin/env python3
"""vuegen CLI - Main Entry Point.

Usage:
    vuegen <command> [options]

Commands:
    new NAME        Create a Vue component with a generated script block
    fixtures        Write every API type x script language combination
    settings        Show effective settings (or --init a settings file)
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from vue_generator import __version__
from vue_generator.cli.create_component import create_component
from vue_generator.cli.create_fixtures import create_fixtures
from vue_generator.cli.settings_command import init_settings, show_settings
from vue_generator.core.dialects import ApiType, ScriptLang

_CONFIG_OPTION_HELP = "Settings file (default: nearest vuegen.yaml, else built-in defaults)"


@click.group(name="vuegen")
@click.version_option(version=__version__, prog_name="vuegen")
def _click_cli() -> None:
    """Generate Vue single-file component script blocks."""


@_click_cli.command(name="new")
@click.argument("name")
@click.option(
    "--api",
    "api",
    type=click.Choice([api.value for api in ApiType]),
    default=ApiType.SETUP.value,
    show_default=True,
    help="Composition API (setup) or Options API (options)",
)
@click.option(
    "--lang",
    "lang",
    type=click.Choice([lang.value for lang in ScriptLang]),
    default=ScriptLang.TS.value,
    show_default=True,
    help="Script language",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help=_CONFIG_OPTION_HELP,
)
@click.option(
    "--out",
    "out_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    help="Directory to write the component into",
)
@click.option("--stdout", "to_stdout", is_flag=True, help="Print instead of writing a file")
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def new_cmd(
    name: str,
    api: str,
    lang: str,
    config_path: Path | None,
    out_dir: Path,
    to_stdout: bool,
    force: bool,
) -> int:
    """Create NAME.vue (NAME is converted to PascalCase)."""
    return create_component(
        name,
        ApiType(api),
        ScriptLang(lang),
        out_dir,
        config_path=config_path,
        to_stdout=to_stdout,
        force=force,
    )


@_click_cli.command(name="fixtures")
@click.option(
    "--out",
    "out_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    help="Base directory for test-output/",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help=_CONFIG_OPTION_HELP,
)
def fixtures_cmd(out_dir: Path, config_path: Path | None) -> int:
    """Write one component per API type and script language."""
    return create_fixtures(out_dir, config_path=config_path)


@_click_cli.command(name="settings")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help=_CONFIG_OPTION_HELP,
)
@click.option("--init", "init", is_flag=True, help="Write vuegen.yaml with all defaults")
@click.option("--force", is_flag=True, help="Overwrite an existing vuegen.yaml with --init")
def settings_cmd(config_path: Path | None, init: bool, force: bool) -> int:
    """Show effective settings."""
    if init:
        return init_settings(Path.cwd(), force=force)
    return show_settings(config_path)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = sys.argv[1:] if argv is None else argv
    try:
        result = _click_cli.main(
            args=args,
            prog_name="vuegen",
            standalone_mode=False,
        )
    except click.Abort:
        print("\n⚠️  Cancelled by user")
        return 130
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    return 0 if result is None else int(result)


if __name__ == "__main__":
    sys.exit(main())
