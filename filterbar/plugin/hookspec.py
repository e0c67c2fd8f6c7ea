"""Hook specifications for filterbar plugins.

This module defines the pluggy hook specification that plugins implement.
Plugins use the @hookimpl decorator to register their implementations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from filterbar.models.filter_def import FilterDefinition

hookspec = pluggy.HookspecMarker("filterbar")


class FilterBarHookSpec:
    """Hook specification defining the plugin interface.

    Plugins supply the filter kinds a filter bar understands. The base
    package ships none of its own.
    """

    @hookspec
    def get_filter_definitions(self) -> list["FilterDefinition"]:
        """Get filter definitions provided by this plugin.

        The order of the returned list is the declaration order of the
        plugin's filters: it decides which filter claims a token that
        several could match, and the order of finished filters and
        suggestions.

        Returns:
            List of FilterDefinition objects, each with a unique id.
        """
