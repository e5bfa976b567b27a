"""Extract, resolve and classify links between notes in a Markdown vault."""

__version__ = "0.1.0"
__all__ = ["classifier", "resolver", "wikilink"]