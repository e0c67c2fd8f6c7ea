"""Data models for filterbar."""

from filterbar.models.filter_def import FilterDefinition, FilterParseError
from filterbar.models.filters import DraftFilter, Filter, FinishedFilter
from filterbar.models.syntax import (
    Completion,
    FixedDigitUnit,
    LiteralUnit,
    NumberUnit,
    OptionSetUnit,
    SyntaxUnit,
    Template,
)

__all__ = [
    "Completion",
    "DraftFilter",
    "Filter",
    "FilterDefinition",
    "FilterParseError",
    "FinishedFilter",
    "FixedDigitUnit",
    "LiteralUnit",
    "NumberUnit",
    "OptionSetUnit",
    "SyntaxUnit",
    "Template",
]
