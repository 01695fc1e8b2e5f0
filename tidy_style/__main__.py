"""
Main entry point for the tidy-style package.

This allows the package to be run as a module:
python -m tidy_style
"""

from .cli.commands import main

if __name__ == '__main__':
    main()
