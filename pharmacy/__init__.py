"""Console pharmacy stock keeping and point-of-sale."""

__version__ = "0.1.0"