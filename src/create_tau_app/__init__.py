"""Scaffold new applications from tagged releases of the Tau template."""

__all__ = ["__version__"]
__version__ = "1.0.0"
