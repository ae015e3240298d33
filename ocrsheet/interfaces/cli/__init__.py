"""CLI interface facades for ocrsheet.

This package is the canonical home for all Click commands. Use the
``ocrsheet.interfaces.cli`` namespace for imports and module execution.
"""

from .__main__ import cli
from .classify import classify
from .convert import convert
from .details import details
from .show import show

__all__ = [
    "classify",
    "cli",
    "convert",
    "details",
    "show",
]
