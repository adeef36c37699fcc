"""Domain value objects."""

from casbin_arango_adapter.domain.value_objects.policy_filter import PolicyFilter

__all__ = ["PolicyFilter"]
