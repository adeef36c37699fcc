"""Domain entities."""

from casbin_arango_adapter.domain.entities.casbin_rule import (
    FIELD_COUNT,
    FIELD_NAMES,
    CasbinRule,
)

__all__ = ["CasbinRule", "FIELD_COUNT", "FIELD_NAMES"]
