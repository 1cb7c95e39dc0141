"""corrlens - correlation matrices and ranked relationships for tabular data."""

__version__ = "0.1.0"
