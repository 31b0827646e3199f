"""Main CLI application entry point.

Defines the Typer application, its options, and the console script
wrapper that maps usage errors to EINVAL.
"""

import errno
import sys
from pathlib import Path
from typing import Annotated

import click
import typer

from scrub import __version__
from scrub.cli.display import print_run_summary
from scrub.core.config import ScrubConfigError, load_config_or_default
from scrub.core.log import setup_logging
from scrub.tree.runner import scrub_paths
from scrub.utils.formatting import print_error

app = typer.Typer(
    name="scrub",
    help="Try to clean a directory tree.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"scrub version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    ctx: typer.Context,
    paths: Annotated[
        list[str] | None,
        typer.Argument(
            help="Directories (or single files) to clean.",
            show_default=False,
        ),
    ] = None,
    clobber_extension: Annotated[
        list[str] | None,
        typer.Option(
            "--clobber-extension",
            "-c",
            metavar="EXT",
            help="Add EXT to the list of extensions to be deleted.",
            show_default=False,
        ),
    ] = None,
    clobber_name: Annotated[
        list[str] | None,
        typer.Option(
            "--clobber-name",
            "-C",
            metavar="NAME",
            help="Add NAME to the list of file names to be deleted.",
            show_default=False,
        ),
    ] = None,
    preserve_hidden: Annotated[
        bool,
        typer.Option(
            "--preserve-hidden",
            "-H",
            help="Halt at hidden directories instead of treating them as normal directories.",
        ),
    ] = False,
    preserve_special: Annotated[
        bool,
        typer.Option(
            "--preserve-special",
            help="Do not delete special files (sockets, devices, pipes, links).",
        ),
    ] = False,
    simulate: Annotated[
        bool,
        typer.Option(
            "--simulate",
            help="Report what would be removed instead of removing it.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            help="Verbose logging output.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Read defaults from this TOML file.",
            show_default=False,
        ),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Delete clobbered files and collapse the empty directories they leave.

    Exits with ENOTEMPTY if an input directory still has content afterwards.
    """
    if not paths:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    try:
        file_config = load_config_or_default(config_path)
    except ScrubConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=errno.EINVAL) from e

    config = file_config.merged(
        clobber_names=clobber_name or (),
        clobber_extensions=clobber_extension or (),
        preserve_hidden=preserve_hidden,
        preserve_special=preserve_special,
        simulate=simulate,
        verbose=verbose,
    )

    setup_logging(config.verbose)
    summary = scrub_paths(paths, config)
    print_run_summary(summary, simulate=config.simulate, verbose=config.verbose)

    raise typer.Exit(code=summary.exit_code)


def run() -> None:
    """Console script entry point.

    Runs the app outside Click's standalone mode so malformed
    invocations print the usage error followed by the full help and
    exit with EINVAL instead of Click's usage code.
    """
    try:
        code = app(standalone_mode=False)
    except click.UsageError as e:
        e.show()
        if e.ctx is not None:
            typer.echo(e.ctx.get_help())
        sys.exit(errno.EINVAL)
    except click.Abort:
        sys.exit(1)
    sys.exit(code or 0)


if __name__ == "__main__":
    run()
