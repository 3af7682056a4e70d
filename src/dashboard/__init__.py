"""Portfolio dashboard backend: live quotes, sector and portfolio summaries."""

__version__ = "0.1.0"
