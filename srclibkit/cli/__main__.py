"""
Entry point for running the srclib CLI as a module.

Usage: python -m srclibkit.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
