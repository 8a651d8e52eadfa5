"""RegionCodeIndex — frozen, bidirectional Region <-> CodeRule lookup."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Generic, Protocol, TypeVar

from mp_regions.kernel.errors.domain import (
    InvalidRuleError,
    RegionNotFoundError,
    UnknownRegionError,
)
from mp_regions.kernel.types.result import Err, Ok, Result
from mp_regions.observability.logging import get_logger
from mp_regions.regions.rules import CodeRule, CodeRuleDescriptor, PrefixRule, RangeRule

R = TypeVar("R", bound=Hashable)


class DigitCode(Protocol):
    """Anything exposing a normalised digit string (``PostalCode``, ``ZIP``, ``AreaCode``)."""

    @property
    def digits(self) -> str: ...


type CodeInput = str | DigitCode
type RuleTable[K] = Mapping[K, Iterable[CodeRule]] | Iterable[tuple[K, Iterable[CodeRule]]]


def _digits(code: CodeInput) -> str:
    if isinstance(code, str):
        return code
    return code.digits


class RegionCodeIndex(Generic[R]):
    """Maps each region to a non-empty tuple of :class:`CodeRule`.

    Regions are tested in table insertion order and the first region with a
    matching rule wins.  The index is immutable once built and safe to share
    across threads.

    Args:
        table: Mapping (or iterable of pairs) from region to its rules.
        name: Short label used in log events.
        miss_message: ``str.format`` template for ``RegionNotFoundError``;
            receives ``code``.
    """

    __slots__ = ("_miss_message", "_name", "_table")

    def __init__(
        self,
        table: RuleTable[R],
        *,
        name: str = "region",
        miss_message: str = "No region for code [{code}] could be found",
    ) -> None:
        entries = table.items() if isinstance(table, Mapping) else table
        frozen: dict[R, tuple[CodeRule, ...]] = {}
        for region, rules in entries:
            if region in frozen:
                raise InvalidRuleError(f"Region [{region}] is declared more than once")
            rule_tuple = tuple(rules)
            if not rule_tuple:
                raise InvalidRuleError(f"Region [{region}] declares no code rules")
            for rule in rule_tuple:
                if not isinstance(rule, (PrefixRule, RangeRule)):
                    raise InvalidRuleError(f"Region [{region}] declares a non-rule value {rule!r}")
            frozen[region] = rule_tuple

        self._table: Mapping[R, tuple[CodeRule, ...]] = MappingProxyType(frozen)
        self._name = name
        self._miss_message = miss_message
        get_logger(__name__).debug(
            "region_index.built",
            index=name,
            regions=len(frozen),
            rules=sum(len(rules) for rules in frozen.values()),
        )

    @classmethod
    def from_table(cls, table: RuleTable[R], **options: str) -> RegionCodeIndex[R]:
        """Build an index from a mapping or a sequence of ``(region, rules)`` pairs."""
        return cls(table, **options)

    # Code -> Region ---------------------------------------------------
    def find_region(self, code: CodeInput) -> R:
        """Return the first region whose rules match *code*.

        Raises:
            RegionNotFoundError: when no rule matches.
        """
        digits = _digits(code)
        for region, rules in self._table.items():
            if any(rule.matches(digits) for rule in rules):
                return region
        get_logger(__name__).debug("region_index.miss", index=self._name, code=str(code))
        raise RegionNotFoundError(str(code), self._miss_message.format(code=code))

    def try_find_region(self, code: CodeInput) -> Result[R, RegionNotFoundError]:
        """Like :meth:`find_region` but returns ``Ok(region)`` / ``Err(error)``."""
        try:
            return Ok(self.find_region(code))
        except RegionNotFoundError as exc:
            return Err(exc)

    # Region -> Codes --------------------------------------------------
    def rules_for(self, region: R) -> tuple[CodeRule, ...]:
        """Rules of *region* in declaration order."""
        try:
            return self._table[region]
        except KeyError:
            raise UnknownRegionError(region) from None

    def find_rules(self, region: R) -> frozenset[CodeRule]:
        """Set of rules issued to *region*; ``UnknownRegionError`` if absent."""
        return frozenset(self.rules_for(region))

    def describe(self, region: R) -> tuple[CodeRuleDescriptor, ...]:
        return tuple(rule.describe() for rule in self.rules_for(region))

    # Introspection ----------------------------------------------------
    @property
    def name(self) -> str:
        return self._name

    @property
    def regions(self) -> tuple[R, ...]:
        return tuple(self._table)

    def __iter__(self) -> Iterator[tuple[R, tuple[CodeRule, ...]]]:
        return iter(self._table.items())

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, region: object) -> bool:
        return region in self._table

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, regions={len(self._table)})"


__all__ = ["CodeInput", "DigitCode", "RegionCodeIndex", "RuleTable"]
