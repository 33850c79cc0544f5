"""
Command-line interface for the widget provisioner.

Provides commands for running the setup wizard and inspecting the
region configuration it writes.
"""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from . import __version__
from .config.defaults import CONFIG_FILENAME, DEFAULT_ENTRY, DEFAULT_REGION, SETTINGS_FILENAME
from .config.loader import load_config
from .config.models import BucketMode, ProvisionDefaults
from .errors import ConfigError, ProvisioningError
from .logging_utils import configure_logging

console = Console()
logger = logging.getLogger("provisioner")


# ============================================================
# Main CLI Group
# ============================================================

@click.group()
@click.version_option(version=__version__, prog_name="provisioner")
@click.pass_context
def cli(ctx):
    """
    Widget Provisioner

    Register an app and marketplace widget, create the widget's storage
    bucket and record everything in a per-region config.json.
    """
    ctx.ensure_object(dict)


# ============================================================
# SETUP Command
# ============================================================

@cli.command()
@click.option(
    "--region",
    "-r",
    type=str,
    default=DEFAULT_REGION,
    envvar="PROVISIONER_REGION",
    show_default=True,
    help="Region to provision (the default region prompts for one)",
)
@click.option(
    "--settings",
    "-s",
    type=click.Path(dir_okay=False),
    default=SETTINGS_FILENAME,
    envvar="PROVISIONER_SETTINGS",
    show_default=True,
    help="YAML file with per-region API credentials",
)
@click.option(
    "--config",
    "-c",
    type=click.Path(dir_okay=False),
    default=CONFIG_FILENAME,
    show_default=True,
    help="Region configuration file to write",
)
@click.option("--entry", "-e", type=str, default=DEFAULT_ENTRY, show_default=True, help="Bucket entry the widget serves")
@click.option(
    "--bucket-mode",
    type=click.Choice([m.value for m in BucketMode]),
    default=BucketMode.SHARED.value,
    show_default=True,
    help="Create a public bucket or a shared bucket with a read ACL",
)
@click.option("--no-region-prompt", is_flag=True, help="Never ask for the region")
@click.option("--verbose", "-v", is_flag=True, help="Log raw API responses")
def setup(
    region: str,
    settings: str,
    config: str,
    entry: str,
    bucket_mode: str,
    no_region_prompt: bool,
    verbose: bool,
):
    """Run the interactive setup wizard."""
    from .wizard import SetupWizard

    configure_logging(verbose)

    try:
        defaults = ProvisionDefaults(entry=entry, bucket_mode=BucketMode(bucket_mode))
    except ValueError as e:
        console.print(f"[red]Invalid option: {e}[/red]")
        sys.exit(1)

    wizard = SetupWizard(
        console=console,
        settings_path=Path(settings),
        config_path=Path(config),
        defaults=defaults,
        interactive_region=not no_region_prompt,
    )

    try:
        wizard.run(region=region)
    except (EOFError, KeyboardInterrupt):
        console.print("\n[yellow]Setup cancelled.[/yellow]")
        sys.exit(1)
    except ProvisioningError as e:
        logger.error(e)
        sys.exit(1)


# ============================================================
# SHOW Command
# ============================================================

@cli.command()
@click.option(
    "--config",
    "-c",
    type=click.Path(dir_okay=False),
    default=CONFIG_FILENAME,
    show_default=True,
    help="Region configuration file to read",
)
def show(config: str):
    """Show the regions recorded in the configuration file."""
    try:
        data = load_config(config)
    except ConfigError as e:
        console.print(f"[red]Error loading configuration: {e}[/red]")
        sys.exit(1)

    active = data.get("region")
    regions = {k: v for k, v in data.items() if k != "region" and isinstance(v, dict)}

    if not regions:
        console.print(f"[yellow]No regions configured in {config}[/yellow]")
        return

    table = Table(title="Region Configuration", show_header=True, header_style="bold cyan")
    table.add_column("Region", style="dim")
    table.add_column("App")
    table.add_column("Widget")
    table.add_column("Source")

    for name, block in regions.items():
        app = block.get("app_json", {})
        widget = block.get("widget_json", {})
        label = f"{name} (active)" if name == active else name
        table.add_row(
            label,
            str(app.get("id", "N/A")),
            str(widget.get("id", "N/A")),
            str(widget.get("source", "N/A")),
        )

    console.print(table)


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
