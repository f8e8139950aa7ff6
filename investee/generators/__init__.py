"""Synthetic data generators."""

from investee.generators.property import PropertyGenerator

__all__ = ["PropertyGenerator"]
