"""MVG departure board: periodic departure refresh with a live clock."""

__version__ = "0.1.0"
