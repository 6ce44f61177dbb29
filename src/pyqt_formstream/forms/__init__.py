"""Top-level form containers."""

from .page import Page, DataModule

__all__ = [
    "Page",
    "DataModule",
]
