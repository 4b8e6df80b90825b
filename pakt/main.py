"""
pakt — CLI entrypoint.

Usage:
    pakt install ripgrep
    pakt --flatpak install org.mozilla.firefox
    pakt --update-all update
    pakt sync
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from pakt import __version__
from pakt.adapters.mock import MockExecutor
from pakt.core.observability.logging_config import setup_logging
from pakt.core.services.selection import SelectionOptions


@click.group()
@click.version_option(version=__version__, prog_name="pakt")
@click.option("--flatpak", "-f", is_flag=True, help="Use flatpak as the package manager.")
@click.option("--nix", "-n", is_flag=True, help="Use nix as the package manager.")
@click.option(
    "--update-all",
    "-a",
    is_flag=True,
    help="Use the system package manager and flatpak together.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--store",
    "store_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Tracking store file (default: ~/.config/pakt/package.json).",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to config.yml (default: ~/.config/pakt/config.yml).",
)
@click.option("--mock", is_flag=True, help="Use mock executor (no real execution).")
@click.option("--dry-run", is_flag=True, help="Print commands but don't execute them.")
@click.pass_context
def cli(
    ctx: click.Context,
    flatpak: bool,
    nix: bool,
    update_all: bool,
    verbose: bool,
    quiet: bool,
    debug: bool,
    store_path: str | None,
    config_path: str | None,
    mock: bool,
    dry_run: bool,
) -> None:
    """pakt — track and sync packages across native package managers."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["store_path"] = Path(store_path).expanduser() if store_path else None
    ctx.obj["config_path"] = Path(config_path).expanduser() if config_path else None
    ctx.obj["dry_run"] = dry_run
    ctx.obj["options"] = SelectionOptions(flatpak=flatpak, nix=nix, update_all=update_all)
    # Tests may pre-seed an executor through CliRunner.invoke(obj=...)
    if mock:
        ctx.obj.setdefault("executor", MockExecutor())
    else:
        ctx.obj.setdefault("executor", None)

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("PAKT_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("PAKT_LOG_FILE"),
        log_file_level=os.environ.get("PAKT_LOG_FILE_LEVEL"),
    )


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def status(ctx: click.Context, as_json: bool) -> None:
    """Show the detected distro and every supported package manager."""
    from pakt.core.use_cases.status import get_status

    result = get_status(
        config_path=ctx.obj.get("config_path"),
        store_path=ctx.obj.get("store_path"),
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(1 if result.error else 0)

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    click.secho("\n🐧 System", fg="cyan", bold=True)
    click.echo(f"   Distro:  {result.distro or 'unknown'}")
    click.echo(f"   Manager: {result.system_manager or 'none detected'}")
    click.echo(f"   Store:   {result.store_path}")
    click.echo()

    click.secho("📦 Package Managers:", fg="cyan", bold=True)
    for mgr in result.managers:
        icon = "✅" if mgr.available else "❌"
        sudo = " (sudo)" if mgr.needs_sudo else ""
        tracked = f" — {mgr.tracked} tracked" if mgr.tracked else ""
        click.echo(f"   {icon} {mgr.id}{sudo}{tracked}")

    for warn in result.warnings:
        click.secho(f"   ⚠️  {warn}", fg="yellow")
    click.echo()


# ── Register package commands from pakt/ui/cli/ ──────────────────

from pakt.ui.cli.packages import install, list_packages, remove, sync, update  # noqa: E402

cli.add_command(install)
cli.add_command(remove)
cli.add_command(update)
cli.add_command(sync)
cli.add_command(list_packages)


if __name__ == "__main__":
    cli()
