"""Completion suggestions for the filter currently being typed.

Every definition's grammar is scanned against the draft text. A definition
whose units already match the whole text exactly is *resolved*; as soon as
one definition is resolved, merely partial matches from other definitions
are dropped, so typing "body" suggests the operators of a ``body`` filter
rather than completions to ``bodySize``.

Single-candidate units are folded together, so "sta" suggests "status="
and "status!=" instead of just "status".
"""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from loguru import logger

from filterbar.models.filter_def import FilterDefinition
from filterbar.models.syntax import Template

SuggestionKind = Literal["full", "partial"]


@dataclass(frozen=True)
class Suggestion:
    """A completion the user can pick for the draft text.

    Attributes:
        index: Offset into the draft text where the replacement starts.
        value: Replacement text.
        show_as: Display label, e.g. "status={3-digit number}".
        definition: The definition this suggestion completes.
        kind: "full" if applying it finishes the filter, else "partial".
        template: True for non-enumerable placeholders. Always partial, and
            the value is informational only.
    """

    index: int
    value: str
    show_as: str
    definition: FilterDefinition
    kind: SuggestionKind
    template: bool = False


class ScanState(enum.Enum):
    """Where scanning a definition's grammar against the text stopped."""

    RESOLVED = "resolved"        # text ends on a unit boundary, units remain
    COMPLETE = "complete"        # every unit matched, text fully consumed
    PARTIAL = "partial"          # text ends inside a unit
    UNMATCHED = "unmatched"      # a unit neither matches nor prefixes the text
    OVERMATCHED = "overmatched"  # units ran out before the text did


@dataclass(frozen=True)
class DefinitionScan:
    """Result of scanning one definition.

    Attributes:
        state: Final scan state.
        unit_index: The unit to suggest from (or the last unit, if COMPLETE).
        position: Offset into the text where that unit starts.
    """

    state: ScanState
    unit_index: int
    position: int

    @property
    def resolved(self) -> bool:
        return self.state in (ScanState.RESOLVED, ScanState.COMPLETE)


def scan_definition(definition: FilterDefinition, text: str) -> DefinitionScan:
    """Walk a definition's units over ``text`` using exact matches."""
    pos = 0
    start = 0
    for index, unit in enumerate(definition.grammar):
        if pos == len(text):
            return DefinitionScan(ScanState.RESOLVED, index, pos)

        consumed = unit.full_match(text, pos)
        if consumed is not None:
            start = pos
            pos += consumed
            continue

        if unit.is_partial_prefix(text, pos):
            return DefinitionScan(ScanState.PARTIAL, index, pos)
        return DefinitionScan(ScanState.UNMATCHED, index, pos)

    if pos == len(text):
        return DefinitionScan(ScanState.COMPLETE, len(definition.grammar) - 1, start)
    return DefinitionScan(ScanState.OVERMATCHED, len(definition.grammar), pos)


def _fold_completions(
    definition: FilterDefinition,
    text: str,
    unit_index: int,
    position: int,
) -> list[Suggestion]:
    """Build suggestions starting at ``unit_index``, folding single candidates."""
    grammar = definition.grammar
    value_prefix = ""
    show_prefix = ""

    for index in range(unit_index, len(grammar)):
        unit = grammar[index]
        is_last = index == len(grammar) - 1
        # Only the first unit sees typed text; folded units start empty.
        if index == unit_index:
            result = unit.completions(text, position)
        else:
            result = unit.completions("", 0)

        if isinstance(result, Template):
            return [
                Suggestion(
                    index=position,
                    value=value_prefix + result.value,
                    show_as=show_prefix + result.show_as,
                    definition=definition,
                    kind="partial",
                    template=True,
                )
            ]

        if len(result) == 1 and not is_last:
            value_prefix += result[0].value
            show_prefix += result[0].show_as
            continue

        kind: SuggestionKind = "full" if is_last else "partial"
        return [
            Suggestion(
                index=position,
                value=value_prefix + completion.value,
                show_as=show_prefix + completion.show_as,
                definition=definition,
                kind=kind,
            )
            for completion in result
        ]

    return []


def suggestions_for_definition(
    definition: FilterDefinition,
    text: str,
    scan: DefinitionScan | None = None,
) -> list[Suggestion]:
    """Suggestions a single definition offers for ``text``."""
    if scan is None:
        scan = scan_definition(definition, text)

    if scan.state is ScanState.COMPLETE:
        matched = text[scan.position:]
        return [
            Suggestion(
                index=scan.position,
                value=matched,
                show_as=matched,
                definition=definition,
                kind="full",
            )
        ]

    if scan.state in (ScanState.RESOLVED, ScanState.PARTIAL):
        return _fold_completions(definition, text, scan.unit_index, scan.position)

    return []


def get_suggestions(definitions: Sequence[FilterDefinition], text: str) -> list[Suggestion]:
    """Suggest completions for the draft text of one filter.

    Args:
        definitions: Filter definitions in declaration order.
        text: The draft filter text. It is not split on whitespace.

    Returns:
        Deduplicated suggestions grouped by definition in declaration order.
        If any definition already matches the whole text exactly, only
        exactly matching definitions contribute.
    """
    scans = [(definition, scan_definition(definition, text)) for definition in definitions]
    if any(scan.resolved for _, scan in scans):
        scans = [(definition, scan) for definition, scan in scans if scan.resolved]

    suggestions: list[Suggestion] = []
    for definition, scan in scans:
        for suggestion in suggestions_for_definition(definition, text, scan):
            if suggestion not in suggestions:
                suggestions.append(suggestion)

    logger.debug("{} suggestion(s) for {!r}", len(suggestions), text)
    return suggestions
