# noqa: D104
"""Shared helpers for the apidoc tooling."""
