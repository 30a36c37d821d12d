"""Terminal browser for a CSV song catalogue, searchable by genre, artist and tempo."""

__version__ = "0.1.0"
__all__ = ["app", "console", "csvline", "library"]