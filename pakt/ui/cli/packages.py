"""
CLI commands for package actions, sync and the tracked list.

Thin wrappers over ``pakt.core.use_cases``.
"""

from __future__ import annotations

import json
import sys

import click

_PROGRESS = {"install": "Installing", "remove": "Removing", "update": "Updating"}
_DONE = {"install": "Installed", "remove": "Removed", "update": "Updated"}


def _run_action(ctx: click.Context, action: str, package: str | None) -> None:
    """Shared body of install/remove/update."""
    from pakt.core.use_cases.package_action import run_package_action

    quiet = ctx.obj.get("quiet", False)
    dry_run = ctx.obj.get("dry_run", False)
    target = package or "all packages"

    if not quiet and not dry_run:
        click.secho(f"📦 {_PROGRESS[action]} {target}...", fg="cyan")

    result = run_package_action(
        action,
        package,
        options=ctx.obj.get("options"),
        config_path=ctx.obj.get("config_path"),
        store_path=ctx.obj.get("store_path"),
        executor=ctx.obj.get("executor"),
        dry_run=dry_run,
    )

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    if result.dry_run:
        click.secho(f"[dry-run] {result.command}", fg="yellow")
        return

    for warn in result.warnings:
        click.secho(f"⚠️  {warn}", fg="yellow")

    click.secho(
        f"✅ {_DONE[action]} {target} ({', '.join(result.managers)})",
        fg="green",
        bold=True,
    )
    if result.store_changed and not quiet:
        click.echo(f"   💾 Tracking store updated: {result.store_path}")


@click.command()
@click.argument("package")
@click.pass_context
def install(ctx: click.Context, package: str) -> None:
    """Install a package and track it."""
    _run_action(ctx, "install", package)


@click.command()
@click.argument("package")
@click.pass_context
def remove(ctx: click.Context, package: str) -> None:
    """Remove a package and stop tracking it."""
    _run_action(ctx, "remove", package)


@click.command()
@click.argument("package", required=False)
@click.pass_context
def update(ctx: click.Context, package: str | None) -> None:
    """Update a package (or everything, if none is given)."""
    _run_action(ctx, "update", package)


@click.command()
@click.pass_context
def sync(ctx: click.Context) -> None:
    """Install every tracked package through its tracked manager."""
    from pakt.core.use_cases.sync import run_sync

    result = run_sync(
        config_path=ctx.obj.get("config_path"),
        store_path=ctx.obj.get("store_path"),
        executor=ctx.obj.get("executor"),
        dry_run=ctx.obj.get("dry_run", False),
    )

    if result.error:
        click.secho(f"❌ Cannot sync: {result.error}", fg="red")
        sys.exit(1)

    if result.status == "empty":
        click.secho(f"⚠️  Nothing to sync — no packages tracked in {result.store_path}", fg="yellow")
        return

    click.echo()
    for receipt in result.receipts:
        count = len(result.packages.get(receipt.manager, []))
        if receipt.ok:
            click.secho(f"   ✓ {receipt.manager}", fg="green", nl=False)
            timing = f" ({receipt.duration_ms}ms)" if receipt.duration_ms else ""
            click.echo(f" — {count} package(s){timing}")
        elif receipt.failed:
            click.secho(f"   ✗ {receipt.manager}", fg="red", nl=False)
            click.echo(f" — {receipt.error}")
        else:
            click.secho(f"   ⊘ {receipt.manager} ", fg="yellow", nl=False)
            click.echo(f"({receipt.output})")

    click.echo()
    status_color = {"ok": "green", "partial": "yellow", "failed": "red"}.get(
        result.status, "white"
    )
    click.secho(
        f"   Result: {result.succeeded}/{result.total} manager(s) synced",
        fg=status_color,
        bold=True,
    )
    click.echo()

    if result.failed > 0:
        sys.exit(1)


@click.command("list")
@click.option("--manager", "-m", default=None, help="Only show one package manager.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def list_packages(ctx: click.Context, manager: str | None, as_json: bool) -> None:
    """List tracked packages."""
    from pakt.core.use_cases.tracked import list_tracked

    result = list_tracked(
        manager=manager,
        config_path=ctx.obj.get("config_path"),
        store_path=ctx.obj.get("store_path"),
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(1 if result.error else 0)

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    if not result.package_managers:
        click.secho("⚠️  No packages tracked", fg="yellow")
        return

    click.secho(f"📦 Tracked ({result.total}):", fg="cyan", bold=True)
    for mgr, pkgs in result.package_managers.items():
        click.secho(f"   {mgr}", bold=True)
        for name in pkgs:
            click.echo(f"     • {name}")
    click.echo()
