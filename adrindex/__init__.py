"""Build a tag-grouped index of Architecture Decision Records."""

__version__ = "0.1.0"
