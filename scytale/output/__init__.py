"""
Scytale Output Module
======================

Console display and report generation for Scytale results.
"""

from scytale.output.console import ScytaleConsoleOutput
from scytale.output.report import ScytaleReportGenerator

__all__ = [
    "ScytaleConsoleOutput",
    "ScytaleReportGenerator",
]
