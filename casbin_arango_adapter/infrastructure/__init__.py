"""Infrastructure layer: ArangoDB persistence, Casbin adapter, logging."""
