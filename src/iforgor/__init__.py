"""iforgor: a tiny interactive todo manager backed by a JSON file."""

__version__ = "0.1.0"
