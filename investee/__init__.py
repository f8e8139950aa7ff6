"""Underwriting calculators and mock lending API for investment property loans."""

__all__ = ["__version__"]

# Keep in sync with the version declared in ``pyproject.toml``
__version__ = "0.1.0"
