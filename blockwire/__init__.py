"""Codecs for block-game network protocol packets, entity metadata and types."""

__version__ = "0.1.0"