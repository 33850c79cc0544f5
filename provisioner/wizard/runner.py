"""
Setup Wizard Runner

Collects operator input, runs the provisioning pipeline and records the
results in config.json.
"""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from ..api.client import ApiClient, ResourceClient
from ..config.defaults import CONFIG_FILENAME, DEFAULT_REGION, SETTINGS_FILENAME
from ..config.loader import load_config, load_credentials
from ..config.models import Credentials, ProvisionDefaults
from ..config.writer import apply_results, write_config
from ..errors import ConfigError
from .pipeline import ProvisioningPipeline
from .region import RegionResolver
from .state import ProvisioningContext, SettingsAccumulator
from .steps.base import ProvisioningStep

logger = logging.getLogger(__name__)


class SetupWizard:
    """
    Orchestrates one interactive setup run.

    Prompts are answered in order (region, name, description) before any
    request is sent. Nothing is written unless every step succeeds.
    """

    BANNER = """
╔═══════════════════════════════════════════════════════════╗
║               WIDGET PROVISIONER SETUP                    ║
║        App, widget and storage bucket registration        ║
╚═══════════════════════════════════════════════════════════╝
"""

    def __init__(
        self,
        console: Optional[Console] = None,
        settings_path: Optional[Path] = None,
        config_path: Optional[Path] = None,
        defaults: Optional[ProvisionDefaults] = None,
        default_region: str = DEFAULT_REGION,
        interactive_region: bool = True,
        ask: Optional[Callable[[str], str]] = None,
        client_factory: Optional[Callable[[Credentials], ResourceClient]] = None,
    ):
        """
        Initialize the wizard.

        Args:
            console: Rich console for output
            settings_path: YAML file with per-region credentials
            config_path: Region configuration file to update
            defaults: Caller defaults for the pipeline
            default_region: Region used when none is chosen
            interactive_region: Whether to ask for the region
            ask: Prompt function, defaults to rich's Prompt.ask
            client_factory: Builds the API client from credentials
        """
        self.console = console or Console()
        self.settings_path = settings_path or Path(SETTINGS_FILENAME)
        self.config_path = config_path or Path(CONFIG_FILENAME)
        self.defaults = defaults or ProvisionDefaults()
        self.ask = ask or self._ask
        self.client_factory = client_factory or ApiClient
        self.resolver = RegionResolver(
            default_region=default_region,
            ask=self.ask,
            interactive=interactive_region,
        )

    @staticmethod
    def _ask(prompt: str) -> str:
        return Prompt.ask(prompt, default="", show_default=False)

    def run(self, region: Optional[str] = None) -> Dict[str, Any]:
        """
        Run the wizard.

        Args:
            region: Requested region

        Returns:
            The configuration that was written

        Raises:
            ConfigError: If no settings file exists or it is invalid
            ProvisioningError: If any remote call fails
        """
        self.console.print(self.BANNER, style="bold blue")

        config = load_config(self.config_path)
        resolution = self.resolver.resolve(region, config)

        credentials = load_credentials(self.settings_path, resolution.region)
        if not credentials:
            raise ConfigError(f"No settings file found at {self.settings_path}")

        name = self.ask("App/Widget name")
        description = self.ask("App/Widget description")

        context = ProvisioningContext(
            client=self.client_factory(credentials),
            defaults=self.defaults,
            logger=logging.getLogger("provisioner.pipeline"),
        )
        pipeline = ProvisioningPipeline.for_app(
            name, description, context, on_step=self._show_step_header
        )
        settings = pipeline.run()

        apply_results(resolution.config, resolution.region, settings.app, settings.widget)
        write_config(resolution.config, self.config_path)

        self._show_completion(resolution.region, settings)
        return resolution.config

    def _show_step_header(self, step_number: int, total_steps: int, step: ProvisioningStep) -> None:
        """Show header for a pipeline step."""
        self.console.rule(
            f"[bold]Step {step_number + 1} of {total_steps}: {step.name}[/bold]",
            style="cyan"
        )
        if step.description:
            self.console.print(f"[dim]{step.description}[/dim]")

    def _show_completion(self, region: str, settings: SettingsAccumulator) -> None:
        """Show setup completion message."""
        self.console.print()
        self.console.print(Panel.fit(
            "[bold green]Setup Complete![/bold green]\n\n"
            f"Configuration saved to: [cyan]{self.config_path}[/cyan]\n"
            f"Region: [cyan]{region}[/cyan]",
            title="✓ Success",
            border_style="green"
        ))

        table = Table(show_header=True, header_style="bold cyan")
        table.add_column("Resource", style="dim")
        table.add_column("Details")
        table.add_row("App", str(settings.app.get("id", "N/A")))
        table.add_row("Widget", str(settings.widget.get("id", "N/A")))
        table.add_row("Source", str(settings.widget.get("source", "N/A")))
        self.console.print(table)
