"""Portrait — layered SVG face compositor."""

__version__ = "0.1.0"
