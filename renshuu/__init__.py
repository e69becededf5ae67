"""Renshuu: handwriting practice worksheets rendered in your own font."""

__version__ = "0.1.0"
