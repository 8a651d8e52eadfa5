"""Code rules — the matchers that decide whether a code belongs to a region.

A rule is one of two variants:

* :class:`PrefixRule` — the code's digits start with ``start``.
* :class:`RangeRule` — the code lies lexicographically between ``start`` and
  ``end`` right-padded with ``9`` out to ``width`` characters.  A range rule
  also accepts any code that starts with ``start``.

Only ``end`` is ever padded.  Codes and ``start`` are compared as-is, so
``"35123"`` falls inside ``range_of("35", "36")`` because
``"35" <= "35123" <= "369999999"``.

Example::

    rule = range_of("700", "715")
    assert rule.matches("71599999")
    assert not rule.matches("716")
"""

from __future__ import annotations

import dataclasses
import enum
import re
from typing import Any, Final, assert_never

from mp_regions.kernel.errors.domain import InvalidRuleError

DEFAULT_PAD_WIDTH: Final = 9
PAD_DIGIT: Final = "9"

_DIGITS: Final = re.compile(r"^[0-9]+$")


def _is_digit_text(value: Any) -> bool:
    return isinstance(value, str) and _DIGITS.match(value) is not None


def _require_digits(value: Any, message: str) -> str:
    if not _is_digit_text(value):
        raise InvalidRuleError(message.format(value), detail={"value": repr(value)})
    return value


class RuleKind(enum.StrEnum):
    PREFIX = "prefix"
    RANGE = "range"


@dataclasses.dataclass(frozen=True, slots=True)
class CodeRuleDescriptor:
    """Read-only description of a rule, for display and validation by callers."""

    kind: RuleKind
    start: str
    end: str | None = None

    def __str__(self) -> str:
        if self.end is None:
            return self.start
        return f"{self.start}-{self.end}"

    def to_dict(self) -> dict[str, Any]:
        return {"kind": str(self.kind), "start": self.start, "end": self.end}


@dataclasses.dataclass(frozen=True, slots=True)
class PrefixRule:
    """Matches every code whose digits begin with ``start``."""

    start: str
    width: int = DEFAULT_PAD_WIDTH

    def __post_init__(self) -> None:
        _require_digits(self.start, "The code prefix [{}] is required")

    @property
    def adjusted_end(self) -> str:
        """Upper bound covered by a bare prefix: all nines at the pad width."""
        return PAD_DIGIT * self.width

    def matches(self, code: str) -> bool:
        return _is_digit_text(code) and code.startswith(self.start)

    def describe(self) -> CodeRuleDescriptor:
        return CodeRuleDescriptor(RuleKind.PREFIX, self.start)


@dataclasses.dataclass(frozen=True, slots=True)
class RangeRule:
    """Matches codes in ``[start, adjusted_end]`` or starting with ``start``.

    ``start`` and ``end`` may have different lengths; neither is reordered.
    """

    start: str
    end: str
    width: int = DEFAULT_PAD_WIDTH

    def __post_init__(self) -> None:
        _require_digits(self.start, "The beginning [{}] of the code range is required")
        _require_digits(self.end, "The end [{}] of the code range is required")
        if not isinstance(self.width, int) or self.width < 1:
            raise InvalidRuleError(f"Pad width [{self.width}] must be a positive integer")

    @property
    def adjusted_end(self) -> str:
        return self.end.ljust(self.width, PAD_DIGIT)

    def in_range(self, code: str) -> bool:
        return _is_digit_text(code) and self.start <= code <= self.adjusted_end

    def matches(self, code: str) -> bool:
        return self.in_range(code) or (_is_digit_text(code) and code.startswith(self.start))

    def describe(self) -> CodeRuleDescriptor:
        return CodeRuleDescriptor(RuleKind.RANGE, self.start, self.end)


type CodeRule = PrefixRule | RangeRule


def prefix(start: str, *, width: int = DEFAULT_PAD_WIDTH) -> PrefixRule:
    """Build a :class:`PrefixRule`; raises ``InvalidRuleError`` on empty/non-digit text."""
    return PrefixRule(start, width)


def range_of(start: str, end: str | None = None, *, width: int = DEFAULT_PAD_WIDTH) -> CodeRule:
    """Build a range rule, or a prefix rule when *end* is absent or blank."""
    if end is None or (isinstance(end, str) and not end.strip()):
        _require_digits(start, "The beginning [{}] of the code range is required")
        return PrefixRule(start, width)
    return RangeRule(start, end, width)


def matches(rule: CodeRule, code: str) -> bool:
    """Dispatch over the rule variant."""
    match rule:
        case PrefixRule():
            return rule.matches(code)
        case RangeRule():
            return rule.matches(code)
        case _:
            assert_never(rule)


__all__ = [
    "CodeRule",
    "CodeRuleDescriptor",
    "DEFAULT_PAD_WIDTH",
    "PAD_DIGIT",
    "PrefixRule",
    "RangeRule",
    "RuleKind",
    "matches",
    "prefix",
    "range_of",
]
