"""Interactive reservation system for three courts over a two-week calendar."""

__version__ = "0.1.0"