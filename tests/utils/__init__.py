"""Shared test fakes."""
