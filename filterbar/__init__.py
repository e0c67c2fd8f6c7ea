"""Structured filter bar engine: matching, suggestions and completion."""

from loguru import logger as _logger

from filterbar.core import (
    FilterBar,
    FilterCatalog,
    Suggestion,
    apply_suggestion_to_filters,
    get_suggestions,
    match_filters,
)
from filterbar.models import (
    DraftFilter,
    FilterDefinition,
    FinishedFilter,
    FixedDigitUnit,
    LiteralUnit,
    NumberUnit,
    OptionSetUnit,
)

_logger.disable("filterbar")

__version__ = "0.1.0"

__all__ = [
    "DraftFilter",
    "FilterBar",
    "FilterCatalog",
    "FilterDefinition",
    "FinishedFilter",
    "FixedDigitUnit",
    "LiteralUnit",
    "NumberUnit",
    "OptionSetUnit",
    "Suggestion",
    "apply_suggestion_to_filters",
    "get_suggestions",
    "match_filters",
]
