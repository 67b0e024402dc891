"""
Entry point for running the srclib CLI as a module.

Usage: python -m srclibkit [command] [options]
"""

from srclibkit.cli.parser import main

if __name__ == "__main__":
    main()
