"""Extraction package for structural page signals."""

from scanner.extraction.signals import PageSignals, extract_signals

__all__ = [
    "PageSignals",
    "extract_signals",
]
