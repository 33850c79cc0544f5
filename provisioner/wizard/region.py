"""
Region Resolution

Chooses the configuration region a setup run writes to.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from rich.prompt import Prompt

from ..config.defaults import DEFAULT_REGION, get_region_skeleton

logger = logging.getLogger(__name__)


def _ask(prompt: str) -> str:
    return Prompt.ask(prompt, default="", show_default=False)


@dataclass
class RegionResolution:
    """Chosen region and the configuration it was seeded into."""
    region: str
    config: Dict[str, Any]


class RegionResolver:
    """
    Resolves the region key for a run and seeds its configuration block.

    A requested region other than the default is adopted as is. When the
    default region is requested the operator is asked; an empty answer keeps
    the default and any other answer becomes the active region.
    """

    def __init__(
        self,
        default_region: str = DEFAULT_REGION,
        ask: Optional[Callable[[str], str]] = None,
        interactive: bool = True,
    ):
        """
        Initialize the resolver.

        Args:
            default_region: Region used when nothing else is chosen
            ask: Prompt function returning the operator's answer
            interactive: Whether the operator may be asked at all
        """
        self.default_region = default_region
        self.ask = ask or _ask
        self.interactive = interactive

    def resolve(self, requested: Optional[str], config: Dict[str, Any]) -> RegionResolution:
        """
        Resolve the region and seed its skeleton into config.

        Args:
            requested: Region requested on the command line
            config: Loaded configuration, modified in place

        Returns:
            RegionResolution with the chosen region
        """
        requested = requested or self.default_region

        if requested != self.default_region or not self.interactive:
            region = requested
        else:
            answer = self.ask(f"Region (default: {self.default_region})").strip()
            if answer:
                region = answer
                config["region"] = region
            else:
                region = self.default_region

        config[region] = get_region_skeleton()
        logger.debug("Using region %s", region)
        return RegionResolution(region=region, config=config)
