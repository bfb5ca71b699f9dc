"""Lesk word sense disambiguation with top-K evaluation against sense-annotated corpora."""

__version__ = "0.1.0"
