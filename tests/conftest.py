"""Shared pytest fixtures for filterbar tests."""

import itertools

import pytest
from loguru import logger

from filterbar.models import (
    FilterDefinition,
    FixedDigitUnit,
    LiteralUnit,
    NumberUnit,
    OptionSetUnit,
)


@pytest.fixture
def make_definition():
    """Factory for definitions from a bare grammar, with generated ids."""
    counter = itertools.count()

    def _make(*grammar, **kwargs):
        n = next(counter)
        kwargs.setdefault("id", f"filter-{n}")
        kwargs.setdefault("name", f"Filter {n}")
        return FilterDefinition(grammar=list(grammar), **kwargs)

    return _make


@pytest.fixture
def qwe_asd_definitions(make_definition):
    """Two two-part literal filters with mirrored order."""
    return [
        make_definition(LiteralUnit(text="qwe"), LiteralUnit(text="asd")),
        make_definition(LiteralUnit(text="asd"), LiteralUnit(text="qwe")),
    ]


@pytest.fixture
def status_definition():
    """status, an operator, then a three-digit code."""
    return FilterDefinition(
        id="status",
        name="Status code",
        grammar=[
            LiteralUnit(text="status"),
            OptionSetUnit(options=["=", "!="]),
            FixedDigitUnit(digits=3),
        ],
    )


@pytest.fixture
def body_size_definition():
    """bodySize, a comparison operator, then any number."""
    return FilterDefinition(
        id="body-size",
        name="Body size",
        grammar=[
            LiteralUnit(text="bodySize"),
            OptionSetUnit(options=["=", ">=", "<="]),
            NumberUnit(),
        ],
    )


@pytest.fixture
def captured_logs():
    """Enable filterbar logging into a list for the duration of a test."""
    messages: list[str] = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{level}|{message}")
    logger.enable("filterbar")
    yield messages
    logger.remove(handler_id)
    logger.disable("filterbar")
