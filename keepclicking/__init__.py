"""keepclicking - personal blog and portfolio site."""

__version__ = "0.1.0"
