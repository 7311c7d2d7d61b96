"""Administrative-region cache and address deduplication registry."""

__version__ = "0.1.0"
