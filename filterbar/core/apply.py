"""Applying a picked suggestion to the filter list."""

from __future__ import annotations

from loguru import logger

from filterbar.core.suggestions import Suggestion
from filterbar.models.filters import Filter


def apply_suggestion_to_filters(filters: list[Filter], suggestion: Suggestion) -> list[Filter]:
    """Apply a suggestion to the draft filter at ``filters[0]``.

    The suggestion must have been generated from the draft's current text;
    this is not checked.

    Args:
        filters: Filter list whose first element is the DraftFilter.
        suggestion: The picked suggestion.

    Returns:
        The input list for template suggestions. For partial suggestions, a
        same-length list with the draft text extended. For full suggestions,
        the draft text is cleared and the finished filter is appended.
    """
    if suggestion.template:
        return filters

    draft = filters[0]
    updated_text = draft.text[:suggestion.index] + suggestion.value

    if suggestion.kind == "partial":
        draft.text = updated_text
        return list(filters)

    draft.text = ""
    logger.debug("Finishing filter '{}' from {!r}", suggestion.definition.id, updated_text)
    return [*filters, suggestion.definition.build(updated_text)]
