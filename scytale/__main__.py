"""
Scytale Module Entry Point
===========================

Allows running the Scytale CLI via: python -m scytale
"""

from scytale.cli import main

if __name__ == "__main__":
    main()
