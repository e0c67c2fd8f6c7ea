"""Filter matching for submitted search bar text.

Splits the text on whitespace and hands each token to the first filter
definition that fully matches it:

    status=404 hello method=GET   →   [DraftFilter("hello"), status, method]

Tokens that match nothing are kept, in order, as the draft text.
"""

from __future__ import annotations

from collections.abc import Sequence

from loguru import logger

from filterbar.models.filter_def import FilterDefinition
from filterbar.models.filters import DraftFilter, Filter


def match_filters(definitions: Sequence[FilterDefinition], text: str) -> list[Filter]:
    """Match search bar text against the available filter definitions.

    Each definition accepts at most one token, the first one (in input
    order) that fully matches it. A token matching several definitions goes
    to the first of them, in declaration order, that is still free.

    Args:
        definitions: Filter definitions in declaration order.
        text: Raw search bar input.

    Returns:
        A DraftFilter holding the unmatched tokens joined by single spaces,
        followed by one finished filter per matched definition, in
        declaration order.
    """
    assigned: dict[int, str] = {}
    leftover: list[str] = []

    for token in text.split():
        for index, definition in enumerate(definitions):
            if index not in assigned and definition.matches(token):
                assigned[index] = token
                break
        else:
            leftover.append(token)

    logger.debug(
        "Matched {} filter(s) from {!r}, leftover {!r}",
        len(assigned), text, leftover,
    )

    result: list[Filter] = [DraftFilter(" ".join(leftover))]
    for index in sorted(assigned):
        result.append(definitions[index].build(assigned[index]))
    return result
