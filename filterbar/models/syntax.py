"""Syntax unit models for filterbar.

A filter grammar is an ordered sequence of syntax units. Each unit knows how
to fully match a value at a position, whether the rest of the text is a
prefix of a value, and which completions it can offer.

Units are a closed set of frozen models tagged by ``kind``, so they can be
declared in TOML and validated as a discriminated union:

    { kind = "literal", text = "status" }
    { kind = "options", options = ["=", "!="] }
    { kind = "number" }
    { kind = "digits", digits = 3 }
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


@dataclass(frozen=True)
class Completion:
    """A single enumerable completion offered by a syntax unit.

    Attributes:
        value: Text that would be inserted.
        show_as: Label to display for it.
    """

    value: str
    show_as: str


@dataclass(frozen=True)
class Template:
    """A non-enumerable completion placeholder, e.g. ``{number}``."""

    show_as: str
    value: str = ""


def _is_digits(value: str) -> bool:
    return bool(value) and all(char in string.digits for char in value)


def _digit_run(text: str, pos: int) -> str:
    end = pos
    while end < len(text) and text[end] in string.digits:
        end += 1
    return text[pos:end]


class LiteralUnit(BaseModel):
    """A fixed string that must appear exactly."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["literal"] = "literal"
    text: str = Field(min_length=1)

    def full_match(self, text: str, pos: int) -> Optional[int]:
        if text.startswith(self.text, pos):
            return len(self.text)
        return None

    def is_partial_prefix(self, text: str, pos: int) -> bool:
        remaining = text[pos:]
        return 0 < len(remaining) < len(self.text) and self.text.startswith(remaining)

    def completions(self, text: str, pos: int) -> list[Completion]:
        if self.text.startswith(text[pos:]):
            return [Completion(self.text, self.text)]
        return []

    def parse(self, matched: str) -> str:
        return matched


class OptionSetUnit(BaseModel):
    """One of a finite, ordered set of strings.

    When the text at a position holds a complete option, that option wins
    over any longer option it is a prefix of. If several options are
    present (``=`` and ``==`` for ``"==4"``), the longest is consumed.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["options"] = "options"
    options: tuple[str, ...] = Field(min_length=1)

    @field_validator("options")
    @classmethod
    def validate_options(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Reject empty and duplicate options."""
        if any(not option for option in v):
            raise ValueError("Options must be non-empty strings")
        if len(set(v)) != len(v):
            raise ValueError(f"Duplicate options in {list(v)}")
        return v

    def full_match(self, text: str, pos: int) -> Optional[int]:
        best: Optional[int] = None
        for option in self.options:
            if text.startswith(option, pos) and (best is None or len(option) > best):
                best = len(option)
        return best

    def is_partial_prefix(self, text: str, pos: int) -> bool:
        remaining = text[pos:]
        if not remaining:
            return False
        return any(
            len(remaining) < len(option) and option.startswith(remaining)
            for option in self.options
        )

    def completions(self, text: str, pos: int) -> list[Completion]:
        remaining = text[pos:]
        return [
            Completion(option, option)
            for option in self.options
            if option.startswith(remaining)
        ]

    def parse(self, matched: str) -> str:
        return matched


class NumberUnit(BaseModel):
    """Any non-empty run of digits, unbounded."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["number"] = "number"
    name: str = Field(default="number", min_length=1)

    @property
    def placeholder(self) -> str:
        return f"{{{self.name}}}"

    def full_match(self, text: str, pos: int) -> Optional[int]:
        digits = _digit_run(text, pos)
        return len(digits) if digits else None

    def is_partial_prefix(self, text: str, pos: int) -> bool:
        # Any non-empty digit run is already a complete number.
        return False

    def completions(self, text: str, pos: int) -> Union[list[Completion], Template]:
        remaining = text[pos:]
        if not remaining:
            return Template(self.placeholder)
        if _is_digits(remaining):
            return [Completion(remaining, remaining)]
        return []

    def parse(self, matched: str) -> int:
        return int(matched)


class FixedDigitUnit(BaseModel):
    """Exactly ``digits`` decimal digits, e.g. an HTTP status code."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["digits"] = "digits"
    digits: int = Field(ge=1)
    name: str = Field(default="number", min_length=1)

    @property
    def placeholder(self) -> str:
        return f"{{{self.digits}-digit {self.name}}}"

    def full_match(self, text: str, pos: int) -> Optional[int]:
        candidate = text[pos:pos + self.digits]
        if len(candidate) == self.digits and _is_digits(candidate):
            return self.digits
        return None

    def is_partial_prefix(self, text: str, pos: int) -> bool:
        remaining = text[pos:]
        return 0 < len(remaining) < self.digits and _is_digits(remaining)

    def completions(self, text: str, pos: int) -> Union[list[Completion], Template]:
        remaining = text[pos:]
        if len(remaining) == self.digits and _is_digits(remaining):
            return [Completion(remaining, remaining)]
        if len(remaining) < self.digits and (not remaining or _is_digits(remaining)):
            return Template(self.placeholder)
        return []

    def parse(self, matched: str) -> int:
        return int(matched)


SyntaxUnit = Annotated[
    Union[LiteralUnit, OptionSetUnit, NumberUnit, FixedDigitUnit],
    Field(discriminator="kind"),
]
