"""
Scytale Shared Module
=====================

Configuration, logging, console presentation, data models and modular
arithmetic shared by every part of the Scytale workbench.
"""

from scytale_shared.config import ScytaleConfig

__all__ = ["ScytaleConfig"]
