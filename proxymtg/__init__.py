"""Read the MTG card database and decklists, and render cards as HTML or text proxies."""

__version__ = "0.1.0"
__all__ = ["__version__"]