"""Filter value types for filterbar.

A filter list always starts with one DraftFilter holding the text still being
edited, followed by finished filters built from fully matched text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from filterbar.models.filter_def import FilterDefinition


@dataclass
class DraftFilter:
    """Editable, unparsed filter text."""

    text: str = ""

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class FinishedFilter:
    """A filter built from text that fully matched its definition.

    Attributes:
        definition: The definition that recognized the text.
        built_from: The exact matched text.
    """

    definition: FilterDefinition
    built_from: str

    @property
    def values(self) -> tuple[Any, ...]:
        """Typed per-unit values of the matched text."""
        return self.definition.parse(self.built_from)

    def __str__(self) -> str:
        return self.built_from


# Factories may return their own finished types in place of FinishedFilter.
Filter = Union[DraftFilter, FinishedFilter]
