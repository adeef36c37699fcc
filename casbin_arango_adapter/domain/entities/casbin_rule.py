"""CasbinRule entity - one stored policy or role-grouping tuple.

A Casbin rule is an ordered tuple of strings tagged with a policy type
(``ptype``). The first character of the ptype names the model section the
rule belongs to:

    ptype='p',  ("alice", "data1", "read")      -> section 'p' (permission)
    ptype='g',  ("alice", "data2_admin")        -> section 'g' (role grouping)
    ptype='g2', ("alice", "admin", "domain1")   -> section 'g'

Storage layout is fixed-width: six positional fields ``v0``..``v5``, unused
trailing fields stored as ``""`` (never missing). Reading a rule back drops
trailing empty fields, so a three-value rule round-trips unchanged.

Reference:
    - infrastructure/persistence/arango_policy_store.py (document I/O)
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

# Number of positional value fields stored per rule
FIELD_COUNT = 6
FIELD_NAMES = tuple(f"v{i}" for i in range(FIELD_COUNT))


@dataclass(frozen=True, slots=True, kw_only=True)
class CasbinRule:
    """Stored representation of one Casbin rule.

    Rules are never mutated in place: removal and re-insertion is the only
    update path, which the frozen dataclass mirrors.

    Attributes:
        ptype: Policy type ("p", "p2", "g", "g2", ...).
        v0: First positional value (usually the subject).
        v1: Second positional value (object, or role for 'g').
        v2: Third positional value (action, or domain for 'g').
        v3: Fourth positional value.
        v4: Fifth positional value.
        v5: Sixth positional value.
        key: Server-assigned document key (``_key``). None until stored.
    """

    ptype: str
    v0: str = ""
    v1: str = ""
    v2: str = ""
    v3: str = ""
    v4: str = ""
    v5: str = ""
    key: str | None = None

    @classmethod
    def from_policy(cls, ptype: str, rule: Sequence[str]) -> "CasbinRule | None":
        """Map a Casbin policy line to a storable rule.

        Args:
            ptype: Policy type of the line.
            rule: Positional values. Values past the sixth are dropped.

        Returns:
            CasbinRule, or None when ptype is blank or the rule has no values.
            A None result is a rejection, not an error.
        """
        if not ptype or not ptype.strip() or not rule:
            return None

        values = [str(value) for value in list(rule)[:FIELD_COUNT]]
        values += [""] * (FIELD_COUNT - len(values))
        return cls(ptype=ptype, **dict(zip(FIELD_NAMES, values)))

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "CasbinRule":
        """Build a rule from an ArangoDB document.

        Missing or null value fields (documents written by other tools) read
        as empty strings. ``_id`` and ``_rev`` are ignored.

        Args:
            document: Document returned by the database.

        Returns:
            CasbinRule with ``key`` set from ``_key``.
        """
        values = {
            name: "" if document.get(name) is None else str(document[name])
            for name in FIELD_NAMES
        }
        return cls(
            ptype=str(document.get("ptype") or ""),
            key=document.get("_key"),
            **values,
        )

    @property
    def values(self) -> list[str]:
        """All six positional values, padding included."""
        return [self.v0, self.v1, self.v2, self.v3, self.v4, self.v5]

    @property
    def section(self) -> str | None:
        """Model section ('p' or 'g' by convention), None for empty ptype."""
        return self.ptype[0] if self.ptype else None

    def to_policy(self) -> list[str] | None:
        """Reconstruct the Casbin policy line.

        Returns:
            Values with trailing empty fields dropped, or None when every
            field is empty. Interior empty values are kept.
        """
        values = self.values
        while values and values[-1] == "":
            values.pop()
        return values or None

    def to_document(self) -> dict[str, str]:
        """Serialize to an ArangoDB document.

        ``_key`` is omitted while unset so the server assigns one.

        Returns:
            dict: Document with ptype and all six value fields.
        """
        document = {"ptype": self.ptype}
        document.update(zip(FIELD_NAMES, self.values))
        if self.key is not None:
            document["_key"] = self.key
        return document
