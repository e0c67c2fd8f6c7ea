"""Core logic for filterbar.

This module provides the core functionality:
- match_filters: Split submitted text into draft and finished filters
- get_suggestions: Completions for the filter being typed
- apply_suggestion_to_filters: Apply a picked completion
- FilterCatalog: Ordered, id-unique filter definitions
- ConfigLoader: Configuration file loading
- PluginManager: Plugin discovery and registration
- FilterBar: Facade over all of the above
"""

from filterbar.core.apply import apply_suggestion_to_filters
from filterbar.core.catalog import CatalogError, FilterCatalog
from filterbar.core.config import (
    Config,
    ConfigError,
    ConfigLoader,
    LoggingConfig,
    PluginsConfig,
)
from filterbar.core.engine import FilterBar
from filterbar.core.matching import match_filters
from filterbar.core.plugin import PluginError, PluginLoadError, PluginManager
from filterbar.core.suggestions import (
    DefinitionScan,
    ScanState,
    Suggestion,
    get_suggestions,
    scan_definition,
)

__all__ = [
    "CatalogError",
    "Config",
    "ConfigError",
    "ConfigLoader",
    "DefinitionScan",
    "FilterBar",
    "FilterCatalog",
    "LoggingConfig",
    "PluginError",
    "PluginLoadError",
    "PluginManager",
    "PluginsConfig",
    "ScanState",
    "Suggestion",
    "apply_suggestion_to_filters",
    "get_suggestions",
    "match_filters",
    "scan_definition",
]
