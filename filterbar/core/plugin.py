"""Plugin management for filterbar.

This module provides the PluginManager class that handles plugin discovery
via Python entry points and registration with pluggy.
"""

from __future__ import annotations

from importlib.metadata import entry_points
from typing import Iterable

import pluggy
from loguru import logger

from filterbar.models.filter_def import FilterDefinition
from filterbar.plugin import FilterBarHookSpec, FilterBarPlugin

# Entry point group name for filterbar plugins
ENTRY_POINT_GROUP = "filterbar.plugins"


class PluginError(Exception):
    """Base exception for plugin-related errors."""


class PluginLoadError(PluginError):
    """Raised when an entry point cannot be loaded as a plugin."""


class PluginManager:
    """Manages plugin discovery and registration.

    Example:
        manager = PluginManager()
        manager.discover()  # Find and register entry point plugins
        manager.register(MyPlugin())  # Manually register a plugin

        definitions = manager.collect_definitions()
    """

    def __init__(self) -> None:
        """Initialize the plugin manager."""
        self.pm = pluggy.PluginManager("filterbar")
        self.pm.add_hookspecs(FilterBarHookSpec)
        self._plugins: dict[str, FilterBarPlugin] = {}

    def register(self, plugin: FilterBarPlugin) -> None:
        """Register a plugin instance.

        Raises:
            PluginError: If a plugin with the same name is already registered.
            PluginLoadError: If pluggy rejects the plugin's hook implementations.
        """
        name = plugin.name
        if name in self._plugins:
            raise PluginError(f"Plugin '{name}' is already registered")
        try:
            self.pm.register(plugin, name=name)
        except (pluggy.PluginValidationError, ValueError) as e:
            # pluggy keeps the name registered when hook validation fails
            if self.pm.is_registered(plugin):
                self.pm.unregister(plugin)
            raise PluginLoadError(f"Plugin '{name}' has invalid hooks: {e}") from e
        self._plugins[name] = plugin
        logger.debug("Registered plugin '{}'", name)

    def unregister(self, name: str) -> None:
        """Unregister a plugin by name."""
        if name in self._plugins:
            plugin = self._plugins.pop(name)
            self.pm.unregister(plugin)

    def _load_entry_point(self, ep) -> FilterBarPlugin:
        try:
            plugin_class = ep.load()
            return plugin_class()
        except Exception as e:
            raise PluginLoadError(f"Failed to load plugin entry point '{ep.name}': {e}") from e

    def discover(self) -> list[str]:
        """Discover and register plugins from entry points.

        Plugins that fail to load are skipped with a warning.

        Returns:
            List of discovered plugin names.
        """
        discovered = []

        for ep in entry_points(group=ENTRY_POINT_GROUP):
            try:
                plugin = self._load_entry_point(ep)
                self.register(plugin)
            except PluginError as e:
                logger.warning("Skipping plugin: {}", e)
                continue
            discovered.append(plugin.name)

        return discovered

    def list_plugins(self) -> list[str]:
        """List all registered plugin names, in registration order."""
        return list(self._plugins.keys())

    def get_plugin(self, name: str) -> FilterBarPlugin | None:
        """Get a plugin by name, or None if not found."""
        return self._plugins.get(name)

    def get_plugin_info(self, name: str) -> dict[str, str] | None:
        """Get information about a plugin.

        Returns:
            Dictionary with plugin info (name, version, description),
            or None if not found.
        """
        plugin = self._plugins.get(name)
        if plugin is None:
            return None

        return {
            "name": plugin.name,
            "version": getattr(plugin, "version", "0.0.0"),
            "description": getattr(plugin, "description", ""),
        }

    def collect_definitions(self, disabled: Iterable[str] = ()) -> list[FilterDefinition]:
        """Collect filter definitions from all registered plugins.

        Plugins are asked in registration order, so the result keeps both
        plugin order and each plugin's own declaration order.
        Definitions are returned as the plugins built them.

        Args:
            disabled: Names of plugins to skip.

        Returns:
            Filter definitions in declaration order.
        """
        skipped = set(disabled)
        definitions: list[FilterDefinition] = []

        for name, plugin in self._plugins.items():
            if name in skipped:
                logger.debug("Plugin '{}' is disabled", name)
                continue
            definitions.extend(plugin.get_filter_definitions() or [])

        return definitions
