# noqa: D104
"""OpenAPI document generation from a resource model."""

__version__ = "0.1.0"
