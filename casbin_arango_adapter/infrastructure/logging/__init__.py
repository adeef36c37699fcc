"""Logging adapters (structlog)."""
