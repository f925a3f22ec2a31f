"""
scoggle-gen — CLI entrypoint.

Usage:
    scoggle-gen                 # same as "scoggle-gen generate"
    scoggle-gen generate --overwrite never
    scoggle-gen check
    scoggle-gen modules
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from scoggle import __version__
from scoggle.adapters.shell.command import ShellCommandAdapter
from scoggle.core.config.loader import (
    ConfigError,
    GeneratorSettings,
    find_settings_file,
    load_settings,
    parse_memory,
)
from scoggle.core.observability.logging_config import setup_logging
from scoggle.ui.cli.console import (
    confirm_for_policy,
    print_document,
    print_error,
    print_success,
)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="scoggle-gen")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to .scoggle.yml (default: ./.scoggle.yml if present).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """scoggle-gen — generate a Sublime Text project for an sbt build."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj.setdefault("runner", ShellCommandAdapter())
    ctx.obj.setdefault("working_directory", Path.cwd())

    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("SCOGGLE_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("SCOGGLE_LOG_FILE"),
        log_file_level=os.environ.get("SCOGGLE_LOG_FILE_LEVEL"),
    )

    path = Path(config_path) if config_path else find_settings_file(ctx.obj["working_directory"])
    try:
        ctx.obj["settings"] = load_settings(path)
    except ConfigError as e:
        print_error(str(e))
        sys.exit(1)

    if ctx.invoked_subcommand is None:
        ctx.invoke(generate)


def _apply_overrides(
    settings: GeneratorSettings,
    overwrite: str | None = None,
    timeout: float | None = None,
    memory: str | None = None,
    substring_paths: bool = False,
) -> GeneratorSettings:
    """Command-line options win over .scoggle.yml."""
    build_updates: dict = {}
    if timeout is not None:
        build_updates["timeout"] = timeout
    if memory is not None:
        build_updates["memory_mb"] = parse_memory(memory)

    updates: dict = {"build": settings.build.model_copy(update=build_updates)}
    if overwrite is not None:
        updates["overwrite"] = overwrite
    if substring_paths:
        updates["relativize"] = "replace"
    return settings.model_copy(update=updates)


def _progress(ctx: click.Context, as_json: bool):
    if as_json or ctx.obj.get("quiet"):
        return None
    return click.echo


@cli.command()
@click.option(
    "--overwrite",
    type=click.Choice(["ask", "always", "never"]),
    default=None,
    help="What to do when the project file exists (default: ask).",
)
@click.option("--timeout", type=click.FloatRange(min=0, min_open=True), default=None,
              help="Give up on sbt after this many seconds.")
@click.option("--memory", "-m", default=None, help="Memory for sbt in MB (passed as -mem).")
@click.option("--substring-paths", is_flag=True,
              help="Strip every occurrence of the working directory from module paths.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def generate(
    ctx: click.Context,
    overwrite: str | None = None,
    timeout: float | None = None,
    memory: str | None = None,
    substring_paths: bool = False,
    as_json: bool = False,
) -> None:
    """Generate <project>.sublime-project from sbt's module layout."""
    from scoggle.core.use_cases.generate import run_generate

    settings = _apply_overrides(
        ctx.obj["settings"], overwrite, timeout, memory, substring_paths,
    )

    result = run_generate(
        working_directory=ctx.obj["working_directory"],
        runner=ctx.obj["runner"],
        confirm=confirm_for_policy(settings.overwrite, err=as_json),
        settings=settings,
        progress=_progress(ctx, as_json),
    )

    if as_json:
        data = result.to_dict()
        if result.delivery and not result.delivery.on_disk:
            data["delivery"]["content"] = result.delivery.content
        click.echo(json.dumps(data, indent=2))
        sys.exit(0 if result.completed else 1)

    if result.error:
        print_error(result.error)
        sys.exit(1)

    delivery = result.delivery
    assert delivery is not None  # guaranteed after error check above
    file_name = Path(delivery.path).name

    if delivery.status == "created":
        print_success(f"Successfully generated {file_name}")
    elif delivery.status == "overwritten":
        click.echo(f"Overwriting {file_name}")
        print_success(f"Successfully generated {file_name}")
    else:
        for error in delivery.errors:
            print_error(error)
        print_document(delivery.content)


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def check(ctx: click.Context, as_json: bool) -> None:
    """Check that the project's sbt version is supported."""
    from scoggle.core.use_cases.generate import run_check_version

    result = run_check_version(ctx.obj["working_directory"], ctx.obj["settings"])

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(1 if result.error else 0)

    if result.error:
        print_error(result.error)
        sys.exit(1)

    assert result.version is not None
    print_success(result.version.describe())


@cli.command()
@click.option("--timeout", type=click.FloatRange(min=0, min_open=True), default=None,
              help="Give up on sbt after this many seconds.")
@click.option("--memory", "-m", default=None, help="Memory for sbt in MB (passed as -mem).")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def modules(
    ctx: click.Context,
    timeout: float | None,
    memory: str | None,
    as_json: bool,
) -> None:
    """List the module base directories sbt reports."""
    from scoggle.core.use_cases.generate import run_list_modules

    settings = _apply_overrides(ctx.obj["settings"], timeout=timeout, memory=memory)
    result = run_list_modules(
        ctx.obj["working_directory"],
        ctx.obj["runner"],
        settings,
        progress=_progress(ctx, as_json),
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(1 if result.error else 0)

    if result.error:
        print_error(result.error)
        sys.exit(1)

    assert result.build is not None
    click.secho(f"   Modules: {len(result.build.module_paths)}", bold=True)
    for path in result.build.module_paths:
        click.echo(f"     • {path}")


if __name__ == "__main__":
    cli()
