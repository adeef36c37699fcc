"""AQL query builders for Casbin rule storage.

Each builder returns an AqlQuery (query text + bind variables) and never
touches the database, so query construction is unit-testable on its own.

The collection is always passed as a collection bind parameter
(``@@collection`` in the query, ``"@collection"`` in bind_vars), never
interpolated into the query text.

Optional filter values use ``NOT_NULL(@fN, r.vM)``: a null bind value makes
the function return the stored field, so the clause compares the field with
itself and always holds. An empty filter value therefore means "any value",
not "empty value".
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from casbin_arango_adapter.domain.entities.casbin_rule import FIELD_COUNT, FIELD_NAMES

COLLECTION_BIND = "@collection"


@dataclass(frozen=True, slots=True, kw_only=True)
class AqlQuery:
    """AQL query text with its bind variables.

    Attributes:
        query: AQL text using ``@name`` / ``@@collection`` placeholders.
        bind_vars: Values for every placeholder in ``query``.
    """

    query: str
    bind_vars: dict[str, Any] = field(default_factory=dict)


def normalize_values(values: Sequence[str], field_index: int = 0) -> list[str]:
    """Pad (or truncate) values to cover positions ``field_index``..5.

    Args:
        values: Positional values starting at ``field_index``.
        field_index: Position of the first value.

    Returns:
        list[str]: Exactly ``6 - field_index`` values, padded with "".
    """
    width = FIELD_COUNT - field_index
    normalized = [str(value) for value in list(values)[:width]]
    normalized += [""] * (width - len(normalized))
    return normalized


def load_all(collection: str) -> AqlQuery:
    """Return every rule document."""
    return AqlQuery(
        query="FOR r IN @@collection RETURN r",
        bind_vars={COLLECTION_BIND: collection},
    )


def insert_many(collection: str, documents: Sequence[dict[str, Any]]) -> AqlQuery:
    """Bulk-insert documents in one query."""
    return AqlQuery(
        query="FOR r IN @rules INSERT r INTO @@collection",
        bind_vars={COLLECTION_BIND: collection, "rules": list(documents)},
    )


def insert_one(collection: str, document: dict[str, Any]) -> AqlQuery:
    """Insert a single document."""
    return AqlQuery(
        query="INSERT @rule INTO @@collection",
        bind_vars={COLLECTION_BIND: collection, "rule": document},
    )


def remove_all(collection: str) -> AqlQuery:
    """Remove every document in the collection."""
    return AqlQuery(
        query="FOR r IN @@collection REMOVE r IN @@collection",
        bind_vars={COLLECTION_BIND: collection},
    )


def remove_exact(collection: str, ptype: str, values: Sequence[str]) -> AqlQuery:
    """Remove rules whose ptype and all six fields equal the given values.

    Returns one element per removed document.

    Args:
        collection: Rule collection.
        ptype: Policy type.
        values: Positional values; padded with "" to six.
    """
    normalized = normalize_values(values)
    lines = ["FOR r IN @@collection", "    FILTER r.ptype == @ptype"]
    lines += [f"    FILTER r.{name} == @{name}" for name in FIELD_NAMES]
    lines += ["    REMOVE r IN @@collection", "    RETURN 1"]

    bind_vars: dict[str, Any] = {COLLECTION_BIND: collection, "ptype": ptype}
    bind_vars.update(zip(FIELD_NAMES, normalized))
    return AqlQuery(query="\n".join(lines), bind_vars=bind_vars)


def remove_filtered(
    collection: str,
    ptype: str,
    field_index: int,
    values: Sequence[str],
) -> AqlQuery:
    """Remove rules matching ``values`` from ``field_index`` onward.

    Position ``field_index + j`` is compared with bind variable ``fj``. Empty
    values bind null and match any stored value. Positions before
    ``field_index`` are unconstrained.

    Returns one element per removed document.

    Args:
        collection: Rule collection.
        ptype: Policy type.
        field_index: First constrained position (0-5).
        values: Values for positions ``field_index`` onward.

    Raises:
        ValueError: If ``field_index`` is outside 0-5.
    """
    if not 0 <= field_index < FIELD_COUNT:
        raise ValueError(
            f"field_index must be in 0..{FIELD_COUNT - 1}, got {field_index}"
        )

    normalized = normalize_values(values, field_index)
    lines = ["FOR r IN @@collection", "    FILTER r.ptype == @ptype"]
    bind_vars: dict[str, Any] = {COLLECTION_BIND: collection, "ptype": ptype}

    for offset, value in enumerate(normalized):
        name = FIELD_NAMES[field_index + offset]
        lines.append(f"    FILTER r.{name} == NOT_NULL(@f{offset}, r.{name})")
        bind_vars[f"f{offset}"] = value or None

    lines += ["    REMOVE r IN @@collection", "    RETURN 1"]
    return AqlQuery(query="\n".join(lines), bind_vars=bind_vars)
