"""Buy-renovate-resell property investment analysis."""

__version__ = "0.1.0"
