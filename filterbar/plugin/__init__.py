"""Plugin system for filterbar.

This module provides the plugin infrastructure using pluggy.
Plugins implement hooks defined in hookspec.py to provide filter definitions.

Usage:
    from filterbar.models import FilterDefinition, LiteralUnit, NumberUnit
    from filterbar.plugin import FilterBarPlugin, hookimpl

    class HttpFilters(FilterBarPlugin):
        name = "http"

        @hookimpl
        def get_filter_definitions(self):
            return [
                FilterDefinition(
                    id="port",
                    name="Port",
                    grammar=[LiteralUnit(text="port="), NumberUnit()],
                ),
            ]

Register it under the ``filterbar.plugins`` entry point group so that
PluginManager.discover() finds it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

from filterbar.plugin.hookspec import FilterBarHookSpec

if TYPE_CHECKING:
    from filterbar.models.filter_def import FilterDefinition

# Create the hookimpl marker for plugins to use
hookimpl = pluggy.HookimplMarker("filterbar")

__all__ = ["FilterBarPlugin", "hookimpl", "FilterBarHookSpec"]


class FilterBarPlugin:
    """Base class for filterbar plugins.

    Subclasses must define:
        name: Unique identifier for the plugin (str)

    Optional attributes:
        version: Plugin version string (str)
        description: Human-readable description (str)
    """

    name: str = "base"
    version: str = "0.0.0"
    description: str = ""

    @hookimpl
    def get_filter_definitions(self) -> list["FilterDefinition"]:
        """Provide no filters by default."""
        return []
