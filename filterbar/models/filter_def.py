"""FilterDefinition data model for filterbar.

A definition describes one recognizable kind of filter expression: an ordered
grammar of syntax units plus a way to turn matched text into a finished filter.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

from filterbar.models.filters import FinishedFilter
from filterbar.models.syntax import SyntaxUnit


class FilterParseError(ValueError):
    """Raised when text does not fully match a filter definition.

    Attributes:
        text: The text that failed to match.
        definition_id: Id of the definition it was matched against.
    """

    def __init__(self, text: str, definition_id: str):
        self.text = text
        self.definition_id = definition_id
        super().__init__(f"{text!r} does not match filter '{definition_id}'")


class FilterDefinition(BaseModel):
    """A filter grammar with metadata.

    Plugins and configuration files provide filter definitions; the order in
    which they are declared decides output and tie-break order everywhere.
    Definitions compare by identity, so two structurally equal definitions
    are still distinct filters.

    Attributes:
        id: Unique identifier for the filter.
        name: Human-readable name for display.
        grammar: Ordered syntax units the filter text must match.
        description: Optional description of what this filter matches.
        source: Origin of the definition (e.g., "plugin:http", "config").
        factory: Optional callable building the finished filter from its
            matched text. Defaults to a plain FinishedFilter.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str
    grammar: tuple[SyntaxUnit, ...] = Field(min_length=1)
    description: Optional[str] = None
    source: Optional[str] = None
    factory: Optional[Callable[[str], Any]] = Field(default=None, exclude=True, repr=False)

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def _split(self, text: str) -> Optional[list[str]]:
        """Split text into the pieces consumed by each unit, or None."""
        pieces: list[str] = []
        pos = 0
        for unit in self.grammar:
            consumed = unit.full_match(text, pos)
            if consumed is None:
                return None
            pieces.append(text[pos:pos + consumed])
            pos += consumed
        if pos != len(text):
            return None
        return pieces

    def matches(self, text: str) -> bool:
        """Check whether the units, in order, consume all of ``text`` exactly."""
        return self._split(text) is not None

    def parse(self, text: str) -> tuple[Any, ...]:
        """Parse fully matching text into one typed value per unit.

        Args:
            text: Filter text, e.g. "status!=404".

        Returns:
            Tuple of unit values, e.g. ("status", "!=", 404).

        Raises:
            FilterParseError: If the text does not fully match this definition.
        """
        pieces = self._split(text)
        if pieces is None:
            raise FilterParseError(text, self.id)
        return tuple(unit.parse(piece) for unit, piece in zip(self.grammar, pieces))

    def build(self, text: str) -> Any:
        """Build the finished filter for matched text.

        The text is trusted to match; callers that cannot guarantee this
        should check ``matches`` first.
        """
        if self.factory is not None:
            return self.factory(text)
        return FinishedFilter(definition=self, built_from=text)
