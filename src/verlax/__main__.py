"""
Verlax - Main entry point

Allows `python -m verlax` by delegating to cli.py.
"""

from .cli import cli

if __name__ == "__main__":
    cli()
