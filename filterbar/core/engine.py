"""FilterBar facade tying the catalog, configuration and plugins together."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Union

from loguru import logger

from filterbar.core.apply import apply_suggestion_to_filters
from filterbar.core.catalog import FilterCatalog
from filterbar.core.config import Config, ConfigLoader
from filterbar.core.matching import match_filters
from filterbar.core.plugin import PluginManager
from filterbar.core.suggestions import Suggestion, get_suggestions
from filterbar.logger import setup_logger
from filterbar.models.filter_def import FilterDefinition
from filterbar.models.filters import DraftFilter, Filter


class FilterBar:
    """Matching, suggestion and completion over one filter catalog.

    Example:
        bar = FilterBar.from_config()
        filters = bar.match("status=404 hello")
        suggestions = bar.suggest(filters[0])
        filters = bar.apply(filters, suggestions[0])
    """

    def __init__(self, definitions: Union[FilterCatalog, Iterable[FilterDefinition]]) -> None:
        if not isinstance(definitions, FilterCatalog):
            definitions = FilterCatalog(definitions)
        self.catalog = definitions

    @classmethod
    def from_config(
        cls,
        start_path: Optional[Path] = None,
        plugin_manager: Optional[PluginManager] = None,
        config: Optional[Config] = None,
    ) -> "FilterBar":
        """Build a filter bar from discovered configuration and plugins.

        Plugin definitions come first, in plugin registration order,
        followed by definitions declared in the configuration.

        Args:
            start_path: Directory for local config discovery (default: cwd).
            plugin_manager: Pre-populated manager. If None, entry point
                plugins are discovered.
            config: Already loaded configuration. If None, it is loaded
                and merged from the discovered config files.

        Raises:
            ConfigError: If a config file is invalid.
            CatalogError: If two definitions share an id.
        """
        if config is None:
            config = ConfigLoader().load_merged(start_path)

        if config.logging.enabled:
            setup_logger(log_level=config.logging.level)

        if plugin_manager is None:
            plugin_manager = PluginManager()
            plugin_manager.discover()

        catalog = FilterCatalog.merge(
            plugin_manager.collect_definitions(disabled=config.plugins.disabled),
            config.filters,
        )
        logger.debug("Filter bar ready with filters: {}", ", ".join(catalog.ids()) or "none")
        return cls(catalog)

    def match(self, text: str) -> list[Filter]:
        """Split submitted text into a draft filter and finished filters."""
        return match_filters(self.catalog, text)

    def suggest(self, draft: Union[str, DraftFilter]) -> list[Suggestion]:
        """Suggest completions for the draft filter (or its text)."""
        text = draft.text if isinstance(draft, DraftFilter) else draft
        return get_suggestions(self.catalog, text)

    def apply(self, filters: list[Filter], suggestion: Suggestion) -> list[Filter]:
        """Apply a suggestion generated from ``filters[0]``'s current text."""
        return apply_suggestion_to_filters(filters, suggestion)
