"""Test suite for casbin-arango-adapter.

Test structure:
- unit/: Unit tests - mocked database handle or in-memory policy store
- integration/: Integration tests - live ArangoDB (skipped when unreachable)
- fixtures/: Casbin model files used by enforcer-level tests
- utils/: Shared fakes (in-memory policy store, fake AQL cursor)
"""
