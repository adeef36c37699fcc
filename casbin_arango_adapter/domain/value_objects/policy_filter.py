"""PolicyFilter value object.

Positional filter used by filtered policy loading. Each section ('p' and 'g')
carries an ordered list of exact-match values; an empty string at a position
is a wildcard.

Usage:
    from casbin_arango_adapter.domain.value_objects import PolicyFilter

    # Only rules whose second value is "domain1"
    policy_filter = PolicyFilter(p=["", "domain1"], g=["", "", "domain1"])
    policy_filter.matches("p", ["alice", "domain1", "data1", "read"])  # True
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True, kw_only=True)
class PolicyFilter:
    """Per-section positional filter (value object).

    Attributes:
        p: Values for policy rules (section 'p'). Empty string = any value.
        g: Values for grouping rules (section 'g'). Empty string = any value.
    """

    p: tuple[str, ...] = field(default_factory=tuple)
    g: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept lists from callers but keep the value object hashable
        object.__setattr__(self, "p", tuple(self.p))
        object.__setattr__(self, "g", tuple(self.g))

    @classmethod
    def coerce(cls, value: Any) -> "PolicyFilter":
        """Build a PolicyFilter from the shapes Casbin callers pass around.

        Accepts a PolicyFilter, a mapping with ``p``/``g`` (or ``P``/``G``)
        keys, or any object exposing those attributes, such as the Filter
        class of Casbin's filtered file adapter. None means "no filter".

        Args:
            value: Filter in any supported shape.

        Returns:
            PolicyFilter equivalent to the input.
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls()
        if isinstance(value, Mapping):
            p = value.get("p", value.get("P"))
            g = value.get("g", value.get("G"))
        else:
            p = getattr(value, "p", getattr(value, "P", None))
            g = getattr(value, "g", getattr(value, "G", None))
        return cls(p=tuple(p or ()), g=tuple(g or ()))

    def values_for(self, section: str) -> tuple[str, ...] | None:
        """Filter values for a section, None for unknown sections."""
        if section == "p":
            return self.p
        if section == "g":
            return self.g
        return None

    def matches(self, section: str, rule: Sequence[str]) -> bool:
        """Check whether a rule passes the filter.

        A rule passes when every non-empty filter value equals the rule value
        at the same position. Positions past the end of the rule never equal
        a non-empty filter value.

        Args:
            section: Model section of the rule ('p' or 'g').
            rule: Reconstructed policy line.

        Returns:
            True if the rule passes, False otherwise (including unknown
            sections).
        """
        values = self.values_for(section)
        if values is None:
            return False

        for index, expected in enumerate(values):
            if not expected:
                continue
            if index >= len(rule) or rule[index] != expected:
                return False
        return True
