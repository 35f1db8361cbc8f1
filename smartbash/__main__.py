# smartbash/__main__.py
"""Allow ``python -m smartbash``."""

from .app import cli

if __name__ == "__main__":  # pragma: no cover
    cli()
