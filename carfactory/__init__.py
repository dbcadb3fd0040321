"""Interactive console car assembly game with part managers, menu screens and run/test checks."""

__version__ = "1.0.0"
__all__ = ["__version__"]