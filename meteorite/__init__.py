"""Tiered in-memory caching and theming primitives."""

__version__ = "0.1.0"