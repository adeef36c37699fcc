"""Domain layer: Casbin rule entity, policy filter and storage ports.

The domain knows nothing about ArangoDB or Casbin's enforcer.
"""
