"""F1 visual race simulator: simulation core and static UI server."""

__version__ = "0.1.0"
