"""
Main module entry point.

This allows running the checker as: python -m kenko.main
"""

from .server import main

if __name__ == "__main__":
    main()
