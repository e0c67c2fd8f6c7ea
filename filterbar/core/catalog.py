"""Ordered catalog of filter definitions.

The catalog fixes declaration order once and hands out stable integer
handles for definitions, so callers can refer to a definition without
relying on object identity.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Optional, overload

from loguru import logger

from filterbar.models.filter_def import FilterDefinition


class CatalogError(Exception):
    """Raised for duplicate or unknown filter definitions."""


class FilterCatalog(Sequence[FilterDefinition]):
    """Immutable, ordered collection of filter definitions with unique ids.

    Example:
        catalog = FilterCatalog([status_filter, method_filter])
        catalog.index_of(status_filter)  # 0
        catalog.get("method")            # method_filter
    """

    def __init__(self, definitions: Iterable[FilterDefinition] = ()) -> None:
        self._definitions: tuple[FilterDefinition, ...] = tuple(definitions)
        self._by_id: dict[str, int] = {}
        for index, definition in enumerate(self._definitions):
            if definition.id in self._by_id:
                existing = self._definitions[self._by_id[definition.id]]
                raise CatalogError(
                    f"Duplicate filter id '{definition.id}' "
                    f"(from {definition.source or 'unknown'}, "
                    f"already defined by {existing.source or 'unknown'})"
                )
            self._by_id[definition.id] = index
        logger.debug("Catalog built with {} definition(s)", len(self._definitions))

    @classmethod
    def merge(cls, *sources: Iterable[FilterDefinition]) -> "FilterCatalog":
        """Concatenate several definition sources, keeping their order."""
        return cls(definition for source in sources for definition in source)

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[FilterDefinition]:
        return iter(self._definitions)

    @overload
    def __getitem__(self, index: int) -> FilterDefinition: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[FilterDefinition, ...]: ...

    def __getitem__(self, index):
        return self._definitions[index]

    def __repr__(self) -> str:
        ids = ", ".join(definition.id for definition in self._definitions)
        return f"FilterCatalog([{ids}])"

    def ids(self) -> list[str]:
        """List definition ids in declaration order."""
        return [definition.id for definition in self._definitions]

    def get(self, filter_id: str) -> Optional[FilterDefinition]:
        """Get a definition by id, or None if not found."""
        index = self._by_id.get(filter_id)
        return None if index is None else self._definitions[index]

    def index_of(self, definition: FilterDefinition) -> int:
        """Get the stable handle of a definition in this catalog.

        Raises:
            CatalogError: If this exact definition object is not in the catalog.
        """
        index = self._by_id.get(definition.id)
        if index is None or self._definitions[index] is not definition:
            raise CatalogError(f"Filter '{definition.id}' is not part of this catalog")
        return index
