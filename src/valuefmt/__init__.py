"""valuefmt — formatting helpers for dates, sizes, numbers and strings."""

__version__ = "0.1.0"
