"""Portfolio dashboard backend: live-quote enrichment for static holdings."""

__version__ = "0.1.0"
